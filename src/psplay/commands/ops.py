"""Command: list registered builder operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from psplay.builders.registry import OPERATIONS
from psplay.commands._base import PsplayCommand
from psplay.output.formatters import format_operations

if TYPE_CHECKING:
    from psplay.commands._context import AppContext


@click.command(
    cls=PsplayCommand,
    examples=[
        ("Every builder", "psplay ops"),
        ("Layer builders only", "psplay ops layer"),
    ],
)
@click.argument("group", required=False, type=click.Choice(sorted(OPERATIONS)))
@click.pass_obj
def ops(app: AppContext, group: str | None) -> None:
    """List builder operations, optionally for one GROUP."""
    groups = {group: OPERATIONS[group]} if group else dict(OPERATIONS)
    click.echo(format_operations(groups, color=app.settings.output.color))
