"""Vector mask and work path commands for the targeted layer."""

from __future__ import annotations

from collections.abc import Mapping

from psplay.builders import layer
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.payload import EnumValue, ObjectValue
from psplay.domain.references import (
    RefChain,
    RefNode,
    by_class,
    by_enum,
    by_ordinal,
    by_property,
    chain,
)
from psplay.domain.units import UnitValue

_VECTOR_MASK = by_enum("path", "path", "vectorMask")
_WORK_PATH = by_property("workPath", domain="path")


def vector_mask_reference() -> RefChain:
    """The vector mask of the targeted layer; resolves to the layer domain."""
    return chain(_VECTOR_MASK, layer.reference_by.target)


def _only(node: RefNode) -> RefChain:
    return chain(node)


def make_bounds_work_path(bounds: Mapping[str, UnitValue]) -> CommandEnvelope:
    """Create a rectangular work path.

    Args:
        bounds: ``top``, ``bottom``, ``left`` and ``right`` unit values.
    """
    return make_command(
        "set",
        {
            "null": _only(_WORK_PATH),
            "to": ObjectValue("rectangle", bounds),
        },
    )


def make_vector_mask_from_work_path() -> CommandEnvelope:
    """Turn the work path into a vector mask on the targeted layer."""
    return make_command(
        "make",
        {
            "null": _only(by_class("path")),
            "at": _only(_VECTOR_MASK),
            "using": _only(by_ordinal("path", "target")),
        },
    )


def delete_work_path() -> CommandEnvelope:
    return make_command("delete", {"null": _only(_WORK_PATH)})


def delete_vector_mask() -> CommandEnvelope:
    return make_command("delete", {"null": vector_mask_reference()})


def select_vector_mask() -> CommandEnvelope:
    return make_command("select", {"null": vector_mask_reference()})


def activate_vector_mask_editing() -> CommandEnvelope:
    """Activate the knots of the targeted vector mask."""
    return make_command(
        "activateVectorMaskEditing",
        {"null": _only(layer.reference_by.target)},
    )


def enter_free_transform_path_mode() -> CommandEnvelope:
    """Free transform the whole path of the targeted vector mask."""
    return make_command(
        "set",
        {
            "null": chain(by_property("freeTransformWholePath"), layer.reference_by.target),
            "_property": "freeTransformWholePath",
            "suppressPlayLevelIncrease": True,
        },
    )


def create_reveal_all_mask() -> CommandEnvelope:
    """Add a reveal-all vector mask to the targeted layer."""
    return make_command(
        "make",
        {
            "null": _only(by_class("path")),
            "at": _only(_VECTOR_MASK),
            "using": EnumValue("vectorMaskEnabled", "revealAll"),
        },
    )
