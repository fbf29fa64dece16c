"""Locate and read psplay.toml.

Lookup order: an explicit ``--config`` path, then ``$PSPLAY_CONFIG``,
then the nearest psplay.toml in the working directory or one of its
parents. An explicit or env path that does not exist means "no config";
the walk-up is not attempted in that case.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "psplay.toml"
CONFIG_ENV_VAR = "PSPLAY_CONFIG"


def search_dirs(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: cwd) and each of its parents, nearest first."""
    here = (start or Path.cwd()).resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to load, or None."""
    pinned = explicit if explicit is not None else os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None
    for directory in search_dirs(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*. Syntax errors surface as a ClickException naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
