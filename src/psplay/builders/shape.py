"""Shape descriptor fragments shared by the content layer builders."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from psplay.domain import units
from psplay.domain.errors import MalformedPayload, UnknownKeyword
from psplay.domain.payload import ObjectValue

STROKE_STYLE_VERSION = 2

# Rectangle corner radius left unset
NO_RADIUS = -1

type Color = Sequence[float] | Mapping[str, float]


def rgb_color(color: Color) -> ObjectValue:
    """Build an ``RGBColor`` object.

    Accepts ``[red, green, blue]`` or ``{"r": .., "g": .., "b": ..}``
    with channels in 0-255. Alpha is ignored here.

    Raises:
        MalformedPayload: If *color* is neither form or a channel is not
            a finite number.
    """
    if isinstance(color, Mapping):
        try:
            channels = [color["r"], color["g"], color["b"]]
        except KeyError as exc:
            raise MalformedPayload(f"color is missing channel {exc.args[0]!r}") from None
    elif isinstance(color, Sequence) and not isinstance(color, str):
        if len(color) < 3:
            raise MalformedPayload(f"color needs three channels, got {list(color)!r}")
        channels = list(color[:3])
    else:
        raise MalformedPayload(f"color must be a channel list or mapping, got {color!r}")
    for channel in channels:
        if not units.is_finite_number(channel):
            raise MalformedPayload(f"color channel must be a finite number, got {channel!r}")
    red, green, blue = channels
    # the host spells the green channel "grain"
    return ObjectValue("RGBColor", {"red": red, "grain": green, "blue": blue})


def pattern_object(pattern: tuple[str, str]) -> ObjectValue:
    pattern_id, name = pattern
    return ObjectValue("pattern", {"ID": pattern_id, "name": name})


def fill_contents(kind: str, value: Any) -> ObjectValue:
    """Fill content for a shape or stroke.

    Args:
        kind: ``"solidColorLayer"`` (value is a color) or
            ``"patternLayer"`` (value is an ``(id, name)`` pattern pair).
    """
    if kind == "solidColorLayer":
        return ObjectValue(kind, {"color": rgb_color(value)})
    if kind == "patternLayer":
        return ObjectValue(kind, {"pattern": pattern_object(value)})
    raise UnknownKeyword("fill content type", kind)


def shape_fill(enabled: bool) -> ObjectValue:
    """Stroke style fragment toggling the shape fill."""
    return ObjectValue(
        "strokeStyle",
        {"fillEnabled": enabled, "strokeStyleVersion": STROKE_STYLE_VERSION},
    )


def shape_stroke(enabled: bool) -> ObjectValue:
    """Stroke style fragment toggling the stroke."""
    return ObjectValue(
        "strokeStyle",
        {"strokeEnabled": enabled, "strokeStyleVersion": STROKE_STYLE_VERSION},
    )


def shape_geometry(kind: str, values: Sequence[float]) -> ObjectValue:
    """Rectangle or ellipse bounds in pixels.

    ``rectangle`` takes ``[top, bottom, left, right]`` optionally followed
    by ``[top_left, top_right, bottom_left, bottom_right]`` corner radii;
    a radius of -1 leaves that corner unset. ``ellipse`` takes
    ``[top, bottom, left, right]``.
    """
    if len(values) < 4:
        raise MalformedPayload(f"{kind} needs top, bottom, left and right, got {list(values)!r}")
    top, bottom, left, right = values[:4]
    fields: dict[str, Any] = {
        "top": units.pixels(top),
        "bottom": units.pixels(bottom),
        "left": units.pixels(left),
        "right": units.pixels(right),
    }
    if kind == "rectangle":
        radii = list(values[4:8])
        if radii and any(radius != NO_RADIUS for radius in radii):
            radii += [0] * (4 - len(radii))
            for key, radius in zip(
                ("topLeft", "topRight", "bottomLeft", "bottomRight"), radii, strict=True
            ):
                fields[key] = units.pixels(0 if radius == NO_RADIUS else radius)
            fields["unitValueQuadVersion"] = 1
    elif kind != "ellipse":
        raise UnknownKeyword("shape type", kind)
    return ObjectValue(kind, fields)
