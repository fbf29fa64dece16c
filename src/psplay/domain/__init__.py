"""Domain layer — units, references, payload tree, command envelope.

This layer depends only on stdlib and pydantic.
It must never import from builders, config, output, or commands.
"""
