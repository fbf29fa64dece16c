"""Artboard commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from psplay.builders import layer
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.errors import MalformedPayload
from psplay.domain.payload import EnumValue, ObjectValue
from psplay.domain.references import Reference, by_class, require_domain


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Artboard rectangle in document pixels."""

    top: float
    left: float
    bottom: float
    right: float

    def to_rect(self) -> ObjectValue:
        return ObjectValue(
            "classFloatRect",
            {"top": self.top, "left": self.left, "bottom": self.bottom, "right": self.right},
        )

    @classmethod
    def coerce(cls, box: BoundingBox | Mapping[str, float]) -> BoundingBox:
        """Accept a BoundingBox or a mapping with the four edges."""
        if isinstance(box, BoundingBox):
            return box
        try:
            return cls(top=box["top"], left=box["left"], bottom=box["bottom"], right=box["right"])
        except KeyError as exc:
            raise MalformedPayload(f"bounding box is missing {exc.args[0]!r}") from None


def make(
    bounding_box: BoundingBox | Mapping[str, float],
    layer_ref: Reference | None = None,
) -> CommandEnvelope:
    """Create an artboard at *bounding_box* holding *layer_ref*.

    Defaults to the targeted layers when *layer_ref* is omitted.
    """
    if layer_ref is None:
        layer_ref = layer.reference_by.target
    else:
        require_domain(layer_ref, layer.DOMAIN, "make_artboard")
    return make_command(
        "make",
        {
            "null": by_class("layerSection"),
            "from": layer_ref,
            "artboardRect": BoundingBox.coerce(bounding_box).to_rect(),
        },
    )


def transform(ref: Reference, bounding_box: BoundingBox | Mapping[str, float]) -> CommandEnvelope:
    """Move or resize an artboard layer to *bounding_box*, growing the canvas if needed."""
    require_domain(ref, layer.DOMAIN, "transform_artboard")
    return make_command(
        "editArtboardEvent",
        {
            "null": ref,
            "artboard": ObjectValue(
                "artboard",
                {
                    "artboardCanvasResize": EnumValue(
                        "artboardCanvasResize", "artboardCanvasResizeExpand"
                    ),
                    "artboardEnabled": True,
                    "artboardRect": BoundingBox.coerce(bounding_box).to_rect(),
                },
            ),
        },
    )
