"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, psplay.toml only contains
overrides. No section is required.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section: how built commands are printed."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    sort_keys: bool = False
    color: bool = True
