"""Content (shape) layer commands — strokes, fills, geometry.

Every builder that takes a reference requires a ``"contentLayer"``
reference. Shared fragments live in :mod:`psplay.builders.shape`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum, StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from psplay.builders import shape
from psplay.builders._tables import frozen_table, lookup
from psplay.domain import units
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.payload import EnumValue, ObjectValue
from psplay.domain.references import Reference, require_domain, wrapper

DOMAIN = "contentLayer"

reference_by = wrapper(DOMAIN)


class AlignmentType(StrEnum):
    """Stroke alignment symbols."""

    OUTSIDE = "strokeStyleAlignOutside"
    CENTER = "strokeStyleAlignCenter"
    INSIDE = "strokeStyleAlignInside"


class ContentType(StrEnum):
    """Kinds of stroke and fill content."""

    SOLID_COLOR = "solidColor"
    GRADIENT = "gradient"
    PATTERN = "pattern"


class OriginType(IntEnum):
    """Shape origin codes."""

    ORIGIN_UNDEFINED = -1
    ORIGIN_NONE = 0
    ORIGIN_RECT = 1
    ORIGIN_ROUNDED_RECT = 2
    ORIGIN_POLYGON = 3
    ORIGIN_LINE = 4
    ORIGIN_ELLIPSE = 5
    ORIGIN_CUSTOM = 6


STROKE_ALIGNMENTS = frozen_table(
    {
        "outside": AlignmentType.OUTSIDE,
        "center": AlignmentType.CENTER,
        "inside": AlignmentType.INSIDE,
    }
)

STROKE_CAPS = frozen_table(
    {
        "square": "strokeStyleSquareCap",
        "round": "strokeStyleRoundCap",
        "butt": "strokeStyleButtCap",
    }
)

STROKE_CORNERS = frozen_table(
    {
        "miter": "strokeStyleMiterJoin",
        "round": "strokeStyleRoundJoin",
        "bevel": "strokeStyleBevelJoin",
    }
)

# keyword -> (pattern ID, localized name)
PATTERNS = frozen_table(
    {
        "pBubbles": (
            "b7334da0-122f-11d4-8bb5-e27e45023b5f",
            "$$$/Presets/Patterns/Patterns_pat/Bubbles=Bubbles",
        ),
        "pTieDye": (
            "1b29876b-58b7-11d4-b895-a898787104c1",
            "$$$/Presets/Patterns/Patterns_pat/TieDye=Tie Dye",
        ),
        "pLaidhorizontal": (
            "52a93427-f5d6-1172-a989-8dc82a43aa51",
            "$$$/Presets/Patterns/Patterns_pat/Laidhorizontal=Laid-horizontal",
        ),
        "pFineGrain": (
            "c02fddff-f05a-1172-9a0f-f7bad69dd4b0",
            "$$$/Presets/Patterns/Patterns_pat/FineGrain=Fine Grain",
        ),
        "pGrayGranite": (
            "f293c3d4-57f7-1177-b70c-a0459fa92660",
            "$$$/Presets/Patterns/Patterns_pat/GrayGranite=Gray Granite",
        ),
    }
)


def _stroke_style(**fields: Any) -> ObjectValue:
    """Enabled stroke style carrying *fields*."""
    return ObjectValue(
        "strokeStyle",
        {"strokeEnabled": True, **fields, "strokeStyleVersion": shape.STROKE_STYLE_VERSION},
    )


def _set_shape_style(ref: Reference, **style: Any) -> CommandEnvelope:
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("shapeStyle", style),
        },
    )


def _pattern_layer(pattern: str, scale: float) -> ObjectValue:
    return ObjectValue(
        "patternLayer",
        {
            "align": True,
            "pattern": shape.pattern_object(lookup(PATTERNS, pattern, "pattern")),
            "phase": ObjectValue("paint", {"horizontal": 0, "vertical": 0}),
            "scale": units.percent(scale),
        },
    )


def set_stroke_alignment(ref: Reference, alignment: str) -> CommandEnvelope:
    """Set stroke alignment: ``"outside"``, ``"center"`` or ``"inside"``."""
    require_domain(ref, DOMAIN, "set_stroke_alignment")
    return _set_shape_style(
        ref,
        strokeStyle=_stroke_style(
            strokeStyleLineAlignment=EnumValue(
                "strokeStyleLineAlignment", lookup(STROKE_ALIGNMENTS, alignment, "stroke alignment")
            )
        ),
    )


def set_stroke_cap(ref: Reference, cap: str) -> CommandEnvelope:
    """Set stroke cap: ``"square"``, ``"round"`` or ``"butt"``."""
    require_domain(ref, DOMAIN, "set_stroke_cap")
    return _set_shape_style(
        ref,
        strokeStyle=_stroke_style(
            strokeStyleLineCapType=EnumValue(
                "strokeStyleLineCapType", lookup(STROKE_CAPS, cap, "stroke cap")
            )
        ),
    )


def set_stroke_corner(ref: Reference, corner: str) -> CommandEnvelope:
    """Set stroke corner: ``"miter"``, ``"round"`` or ``"bevel"``."""
    require_domain(ref, DOMAIN, "set_stroke_corner")
    return _set_shape_style(
        ref,
        strokeStyle=_stroke_style(
            strokeStyleLineJoinType=EnumValue(
                "strokeStyleLineJoinType", lookup(STROKE_CORNERS, corner, "stroke corner")
            )
        ),
    )


def set_stroke_opacity(ref: Reference, opacity: float) -> CommandEnvelope:
    """Set stroke opacity as a percentage in [0, 100]."""
    require_domain(ref, DOMAIN, "set_stroke_opacity")
    return _set_shape_style(ref, strokeStyle=_stroke_style(strokeStyleOpacity=units.percent(opacity)))


def set_shape_fill_type_solid_color(ref: Reference, rgb: shape.Color | None) -> CommandEnvelope:
    """Fill the shape with a solid color, or remove the fill when *rgb* is None.

    Examples::

        set_shape_fill_type_solid_color(reference_by.current, [100, 200, 150])
    """
    require_domain(ref, DOMAIN, "set_shape_fill_type_solid_color")
    if rgb is None:
        return _set_shape_style(ref, strokeStyle=shape.shape_fill(False))
    return _set_shape_style(
        ref,
        fillContents=shape.fill_contents("solidColorLayer", rgb),
        strokeStyle=shape.shape_fill(True),
    )


def set_stroke_fill_type_solid_color(
    ref: Reference, rgba: shape.Color | None
) -> CommandEnvelope:
    """Stroke with a solid color, or remove the stroke when *rgba* is None.

    When *rgba* is a mapping with an ``"a"`` channel in [0, 1], the
    stroke opacity is set from it as well.
    """
    require_domain(ref, DOMAIN, "set_stroke_fill_type_solid_color")
    if rgba is None:
        return _set_shape_style(ref, strokeStyle=shape.shape_stroke(False))
    fields: dict[str, Any] = {"strokeStyleContent": shape.fill_contents("solidColorLayer", rgba)}
    if isinstance(rgba, Mapping) and rgba.get("a") is not None:
        fields["strokeStyleOpacity"] = units.percent(rgba["a"] * 100)
    return _set_shape_style(ref, strokeStyle=_stroke_style(**fields))


def set_shape_stroke_width(ref: Reference, stroke_width: float) -> CommandEnvelope:
    """Set stroke width in pixels."""
    require_domain(ref, DOMAIN, "set_shape_stroke_width")
    return _set_shape_style(
        ref, strokeStyle=_stroke_style(strokeStyleLineWidth=units.pixels(stroke_width))
    )


def set_stroke_fill_type_pattern(ref: Reference, pattern: str, scale: float) -> CommandEnvelope:
    """Stroke with a preset pattern (key of :data:`PATTERNS`) at *scale* percent."""
    require_domain(ref, DOMAIN, "set_stroke_fill_type_pattern")
    return _set_shape_style(
        ref, strokeStyle=_stroke_style(strokeStyleContent=_pattern_layer(pattern, scale))
    )


def set_shape_fill_type_pattern(ref: Reference, pattern: str, scale: float) -> CommandEnvelope:
    """Fill with a preset pattern (key of :data:`PATTERNS`) at *scale* percent."""
    require_domain(ref, DOMAIN, "set_shape_fill_type_pattern")
    return _set_shape_style(
        ref,
        fillContents=_pattern_layer(pattern, scale),
        strokeStyle=shape.shape_fill(True),
    )


def delete_shape_style(ref: Reference) -> CommandEnvelope:
    """Remove the stroke style entirely. Shapes without a fill may vanish."""
    require_domain(ref, DOMAIN, "delete_shape_style")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("deleteShapeStyle", {}),
        },
    )


def move_shape(ref: Reference, horizontal: float, vertical: float) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "move_shape")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue(
                "_offset",
                {
                    "horizontal": units.distance(horizontal),
                    "vertical": units.distance(vertical),
                },
            ),
        },
    )


class ShapeSpec(BaseModel):
    """Everything :func:`create_shape` needs to describe a new shape.

    ``fill_value``/``stroke_value`` are colors for ``solidColorLayer``
    content and pattern keywords for ``patternLayer`` content.
    """

    model_config = {"frozen": True}

    shape_type: Literal["rectangle", "ellipse"] = "rectangle"
    bounds: list[float] = Field(min_length=4, max_length=8)
    fill_enabled: bool = True
    fill_kind: Literal["solidColorLayer", "patternLayer"] = "solidColorLayer"
    fill_value: Any = (0, 0, 0)
    stroke_enabled: bool = False
    stroke_kind: Literal["solidColorLayer", "patternLayer"] = "solidColorLayer"
    stroke_value: Any = (0, 0, 0)
    stroke_alignment: str = "outside"
    cap: str = "butt"
    corner: str = "miter"
    stroke_width: float = 1.0


def _content(kind: str, value: Any) -> ObjectValue:
    if kind == "patternLayer":
        value = lookup(PATTERNS, value, "pattern")
    return shape.fill_contents(kind, value)


def create_shape(ref: Reference, spec: ShapeSpec | Mapping[str, Any]) -> CommandEnvelope:
    """Create a rectangle, rounded rectangle or ellipse.

    Examples::

        create_shape(
            reference_by.target,
            ShapeSpec(
                bounds=[300, 500, 250, 600, 10, 10, 10, 10],
                fill_value=[255, 150, 200],
                stroke_enabled=True,
                stroke_kind="patternLayer",
                stroke_value="pBubbles",
                stroke_width=10,
            ),
        )
    """
    require_domain(ref, DOMAIN, "create_shape")
    if not isinstance(spec, ShapeSpec):
        spec = ShapeSpec.model_validate(spec)
    stroke_style = ObjectValue(
        "strokeStyle",
        {
            "fillEnabled": spec.fill_enabled,
            "strokeEnabled": spec.stroke_enabled,
            "strokeStyleBlendMode": EnumValue("blendMode", "normal"),
            "strokeStyleContent": _content(spec.stroke_kind, spec.stroke_value),
            "strokeStyleLineAlignment": EnumValue(
                "strokeStyleLineAlignment",
                lookup(STROKE_ALIGNMENTS, spec.stroke_alignment, "stroke alignment"),
            ),
            "strokeStyleLineCapType": EnumValue(
                "strokeStyleLineCapType", lookup(STROKE_CAPS, spec.cap, "stroke cap")
            ),
            "strokeStyleLineDashOffset": units.points(0),
            "strokeStyleLineDashSet": [],
            "strokeStyleLineJoinType": EnumValue(
                "strokeStyleLineJoinType", lookup(STROKE_CORNERS, spec.corner, "stroke corner")
            ),
            "strokeStyleLineWidth": units.points(spec.stroke_width),
            "strokeStyleMiterLimit": 100,
            "strokeStyleOpacity": units.percent(100),
            "strokeStyleResolution": 72,
            "strokeStyleScaleLock": False,
            "strokeStyleStrokeAdjust": False,
            "strokeStyleVersion": shape.STROKE_STYLE_VERSION,
        },
    )
    return make_command(
        "make",
        {
            "null": ref,
            "using": ObjectValue(
                "contentLayer",
                {
                    "shape": shape.shape_geometry(spec.shape_type, spec.bounds),
                    "strokeStyle": stroke_style,
                    "type": _content(spec.fill_kind, spec.fill_value),
                },
            ),
        },
    )


def set_radius(
    top_left: float,
    top_right: float | None = None,
    bottom_right: float | None = None,
    bottom_left: float | None = None,
) -> CommandEnvelope:
    """Set the corner radii of the targeted rectangle.

    Corners left as None take *top_left*; an explicit 0 is kept.
    """
    radii: Sequence[tuple[str, float | None]] = (
        ("topLeft", top_left),
        ("topRight", top_right),
        ("bottomLeft", bottom_left),
        ("bottomRight", bottom_right),
    )
    fields: dict[str, Any] = {
        key: units.pixels(top_left if radius is None else radius) for key, radius in radii
    }
    fields["unitValueQuadVersion"] = 1
    return make_command(
        "changePathDetails",
        {
            "keyActionChangeAllCorners": True,
            "keyOriginRRectRadii": ObjectValue("radii", fields),
            "keyOriginType": OriginType.ORIGIN_RECT,
        },
    )
