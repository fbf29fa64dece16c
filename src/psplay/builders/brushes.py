"""Brush commands."""

from __future__ import annotations

from psplay.domain import units
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.payload import ObjectValue
from psplay.domain.references import wrapper

DOMAIN = "brushes"

reference_by = wrapper(DOMAIN)

DEFAULT_HARDNESS = 100
DEFAULT_ANGLE = 0
DEFAULT_ROUNDNESS = 100
DEFAULT_SPACING = 1


def set_brush_tip(
    diameter: float,
    hardness: float | None = None,
    angle: float | None = None,
    roundness: float | None = None,
    spacing: float | None = None,
) -> CommandEnvelope:
    """Set the current brush tip.

    Omitted parameters take their defaults (hardness 100%, angle 0,
    roundness 100%, spacing 1%). An explicit 0 is sent as 0.

    Args:
        diameter: Tip diameter in pixels.
        hardness: Percentage.
        angle: Degrees.
        roundness: Percentage.
        spacing: Percentage of the diameter.
    """
    return make_command(
        "set",
        {
            "null": reference_by.current,
            "to": ObjectValue(
                "computedBrush",
                {
                    "diameter": units.pixels(diameter),
                    "hardness": units.percent(DEFAULT_HARDNESS if hardness is None else hardness),
                    "angle": units.angle(DEFAULT_ANGLE if angle is None else angle),
                    "roundness": units.percent(
                        DEFAULT_ROUNDNESS if roundness is None else roundness
                    ),
                    "spacing": units.percent(DEFAULT_SPACING if spacing is None else spacing),
                },
            ),
        },
    )
