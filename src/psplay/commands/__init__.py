"""Subcommand modules for psplay.

Provides register_commands() which uses deferred imports to keep
``psplay --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from psplay.commands.build import build
    from psplay.commands.ops import ops

    cli.add_command(build)
    cli.add_command(ops)
