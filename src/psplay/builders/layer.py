"""Layer commands — ordering, alignment, visibility, transforms, styling.

Every builder that takes a reference requires a ``"layer"`` reference.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from psplay.builders._tables import frozen_table, lookup
from psplay.domain import units
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.payload import EnumValue, ObjectValue
from psplay.domain.references import Reference, by_class, require_domain, wrapper
from psplay.domain.units import UnitValue

DOMAIN = "layer"

reference_by = wrapper(DOMAIN)


class LayerKind(IntEnum):
    """Layer kind codes reported by the host."""

    ANY = 0
    PIXEL = 1
    ADJUSTMENT = 2
    TEXT = 3
    VECTOR = 4
    SMARTOBJECT = 5
    VIDEO = 6
    GROUP = 7
    THREE_D = 8
    GRADIENT = 9
    PATTERN = 10
    SOLIDCOLOR = 11
    BACKGROUND = 12
    GROUPEND = 13


ALIGN_VALUES = frozen_table(
    {
        "left": "ADSLefts",
        "right": "ADSRights",
        "horizontally": "ADSCentersH",
        "center": "ADSCentersH",
        "hCenter": "ADSCentersH",
        "middle": "ADSCentersV",
        "vCenter": "ADSCentersV",
        "vertically": "ADSCentersV",
        "top": "ADSTops",
        "bottom": "ADSBottoms",
    }
)

SELECT_MODIFIERS = frozen_table(
    {
        "select": "0",
        "deselect": "removeFromSelection",
        "add": "addToSelection",
        "addUpTo": "addToSelectionContinuous",
    }
)


def _pixels(value: UnitValue | int | float) -> UnitValue:
    # bare numbers are pixel quantities
    return value if isinstance(value, UnitValue) else units.pixels(value)


def reorder(source_ref: Reference, target_ref: Reference) -> CommandEnvelope:
    """Move *source_ref* to right before *target_ref* (usually by id)."""
    require_domain(source_ref, DOMAIN, "reorder")
    return make_command(
        "move",
        {
            "adjustment": False,
            "null": source_ref,
            "to": target_ref,
            "version": 5,
        },
    )


def align(ref: Reference, alignment: str) -> CommandEnvelope:
    """Align the referenced layers.

    Args:
        ref: Layers to align.
        alignment: Key of :data:`ALIGN_VALUES` (``"left"``, ``"middle"``...).
    """
    require_domain(ref, DOMAIN, "align")
    return make_command(
        "align",
        {
            "null": ref,
            "using": EnumValue("alignDistributeSelector", lookup(ALIGN_VALUES, alignment, "alignment")),
        },
    )


def distribute(ref: Reference, alignment: str) -> CommandEnvelope:
    """Distribute the referenced layers along *alignment*."""
    require_domain(ref, DOMAIN, "distribute")
    return make_command(
        "distort",
        {
            "null": ref,
            "using": EnumValue("alignDistributeSelector", lookup(ALIGN_VALUES, alignment, "alignment")),
        },
    )


def select(ref: Reference, make_visible: bool = False, modifier: str = "select") -> CommandEnvelope:
    """Select layer(s).

    Args:
        ref: Layers to select.
        make_visible: Also show the layers.
        modifier: ``"select"``, ``"deselect"``, ``"add"`` or ``"addUpTo"``.
    """
    require_domain(ref, DOMAIN, "select")
    return make_command(
        "select",
        {
            "null": ref,
            "makeVisible": make_visible,
            "selectionModifier": EnumValue(
                "selectionModifierType", lookup(SELECT_MODIFIERS, modifier, "selection modifier")
            ),
        },
    )


def deselect_all() -> CommandEnvelope:
    return make_command("selectNoLayers", {"null": reference_by.target})


def hide(ref: Reference) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "hide")
    return make_command("hide", {"null": ref})


def show(ref: Reference) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "show")
    return make_command("show", {"null": ref})


def duplicate(ref: Reference, name: str | None = None) -> CommandEnvelope:
    """Duplicate layer(s), naming the copy when *name* is given."""
    require_domain(ref, DOMAIN, "duplicate")
    payload: dict[str, Any] = {"null": ref}
    if name is not None:
        payload["name"] = name
    return make_command("duplicate", payload)


def flip(ref: Reference, orientation: str) -> CommandEnvelope:
    """Flip layer(s) about ``"horizontal"`` or ``"vertical"``."""
    require_domain(ref, DOMAIN, "flip")
    return make_command(
        "flip",
        {
            "null": ref,
            "axis": EnumValue("orientation", orientation),
        },
    )


def set_size(
    ref: Reference,
    width: UnitValue | float | None = None,
    height: UnitValue | float | None = None,
) -> CommandEnvelope:
    """Resize layer(s). Omitted dimensions are left out of the payload."""
    require_domain(ref, DOMAIN, "set_size")
    payload: dict[str, Any] = {"null": ref}
    if width is not None:
        payload["width"] = _pixels(width)
    if height is not None:
        payload["height"] = _pixels(height)
    return make_command("transform", payload)


def rotate(ref: Reference, angle: float) -> CommandEnvelope:
    """Rotate layer(s) by *angle* degrees.

    Rotation is stateless on the host: ``rotate(x)`` then ``rotate(y)``
    equals ``rotate(x + y)``.
    """
    require_domain(ref, DOMAIN, "rotate")
    return make_command(
        "transform",
        {
            "null": ref,
            "angle": units.angle(angle),
        },
    )


def set_opacity(ref: Reference, opacity: float) -> CommandEnvelope:
    """Set layer opacity, a percentage in [0, 100]."""
    require_domain(ref, DOMAIN, "set_opacity")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("layer", {"opacity": units.percent(opacity)}),
        },
    )


def set_fill_opacity(ref: Reference, opacity: float) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "set_fill_opacity")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("layer", {"fillOpacity": units.percent(opacity)}),
        },
    )


def set_blend_mode(ref: Reference, mode: str) -> CommandEnvelope:
    """Set the blend mode, e.g. ``"normal"``, ``"multiply"``, ``"screen"``."""
    require_domain(ref, DOMAIN, "set_blend_mode")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("layer", {"mode": EnumValue("blendMode", mode)}),
        },
    )


def delete(ref: Reference) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "delete")
    return make_command("delete", {"null": ref})


def rename(ref: Reference, name: str) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "rename")
    return make_command(
        "set",
        {
            "null": ref,
            "to": ObjectValue("layer", {"name": name}),
        },
    )


def group_selected() -> CommandEnvelope:
    """Group the currently selected layers into a new layer section."""
    return make_command(
        "make",
        {
            "from": reference_by.target,
            "null": by_class("layerSection"),
        },
    )


def set_locking(ref: Reference, lock: bool) -> CommandEnvelope:
    """Lock (transparency and composite) or fully unlock layer(s)."""
    require_domain(ref, DOMAIN, "set_locking")
    if lock:
        locking = {"protectTransparency": True, "protectComposite": True}
    else:
        locking = {"protectNone": True}
    return make_command(
        "applyLocking",
        {
            "null": ref,
            "group": True,
            "layerLocking": ObjectValue("layerLocking", locking),
        },
    )


def translate(
    ref: Reference,
    x: UnitValue | float | None = None,
    y: UnitValue | float | None = None,
) -> CommandEnvelope:
    """Offset layer(s). Absent offsets default to 0 pixels."""
    require_domain(ref, DOMAIN, "translate")
    return make_command(
        "transform",
        {
            "null": ref,
            "position": ObjectValue(
                "position",
                {
                    "horizontal": _pixels(0 if x is None else x),
                    "vertical": _pixels(0 if y is None else y),
                },
            ),
        },
    )
