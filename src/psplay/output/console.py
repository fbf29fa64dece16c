"""Rich consoles that render into a string.

Formatters return text and leave printing to ``click.echo``, so every
console here writes to a StringIO. Rich drops color codes on its own
when the process is not attached to a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO
from typing import Any

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

PSPLAY_THEME = Theme(
    {
        "psplay.group": "bold cyan",
        "psplay.op": "bold",
        "psplay.ref": "blue",
        "psplay.summary": "dim",
    }
)


def create_console(*, color: bool = True, width: int | None = None) -> Console:
    """A themed Console writing to a fresh StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PSPLAY_THEME,
        no_color=not color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render(renderable: Any, *, color: bool = True, soft_wrap: bool = False) -> str:
    """Print *renderable* to a scratch console and return the text.

    ``soft_wrap`` disables wrapping and cropping, for output that must
    survive a copy and paste (JSON).
    """
    console = create_console(color=color)
    console.print(renderable, soft_wrap=soft_wrap)
    return get_output(console).rstrip("\n")
