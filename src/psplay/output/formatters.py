"""Render commands and the builder catalogue.

Commands print as wire JSON. Plain JSON is used when piping or with
``--compact``; Rich highlighting is applied only for color output.
"""

from __future__ import annotations

import json as _json
from collections.abc import Mapping
from typing import TYPE_CHECKING

from rich.json import JSON
from rich.table import Table

from psplay.output.console import render

if TYPE_CHECKING:
    from psplay.builders.registry import Operation
    from psplay.config.models import OutputConfig
    from psplay.domain.command import CommandEnvelope


def format_command(
    envelope: CommandEnvelope,
    *,
    output: OutputConfig,
    compact: bool = False,
) -> str:
    """Format a command as ``{"command": ..., "descriptor": ...}`` JSON."""
    wire = envelope.to_wire()
    if compact:
        return _json.dumps(wire, sort_keys=output.sort_keys, separators=(",", ":"))
    text = _json.dumps(wire, indent=output.indent or None, sort_keys=output.sort_keys)
    if not output.color:
        return text
    return render(
        JSON(text, indent=output.indent or None, sort_keys=output.sort_keys),
        soft_wrap=True,
    )


def format_operations(
    groups: Mapping[str, Mapping[str, Operation]],
    *,
    color: bool = True,
) -> str:
    """Tabulate registered builders: group, operation, --ref domain, summary."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Group", style="psplay.group")
    table.add_column("Operation", style="psplay.op")
    table.add_column("Ref", style="psplay.ref")
    table.add_column("Summary", style="psplay.summary")
    for group, operations in groups.items():
        for name, operation in operations.items():
            table.add_row(group, name, operation.ref_domain or "-", operation.summary)
    return render(table, color=color)
