"""Tool selection and tool option commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.payload import ObjectValue
from psplay.domain.references import by_class, by_ordinal, by_property, chain

_APPLICATION = by_ordinal("application", "target")


def set_tool(tool: str) -> CommandEnvelope:
    """Select a tool by class name, e.g. ``"moveTool"``."""
    return make_command("select", {"null": by_class(tool)})


def set_tool_options(tool: str, options: Mapping[str, Any]) -> CommandEnvelope:
    """Apply *options* to the current options of *tool*."""
    return make_command(
        "set",
        {
            "null": by_class(tool),
            "to": ObjectValue("currentToolOptions", options),
        },
    )


def set_direct_select_option_for_all_layers(all_layers: bool) -> CommandEnvelope:
    """Whether vector selection also changes the layer selection."""
    return make_command(
        "set",
        {
            "null": chain(by_property("generalPreferences"), _APPLICATION),
            "to": ObjectValue(
                "generalPreferences",
                {
                    "legacyPathDrag": True,
                    "vectorSelectionModifiesLayerSelection": all_layers,
                },
            ),
        },
    )


def reset_shape_tool() -> CommandEnvelope:
    return make_command(
        "reset",
        {"null": chain(by_property("vectorToolMode", domain=None), _APPLICATION)},
    )
