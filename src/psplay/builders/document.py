"""Document commands — open, save, create, canvas, guides, extension data.

Reference-taking builders require a ``"document"`` reference. Settings
for open/save/create are frozen pydantic models whose defaults apply
only to fields the caller leaves unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Any, Literal

from pydantic import BaseModel

from psplay.builders._tables import frozen_table, lookup
from psplay.domain import units
from psplay.domain.command import CommandEnvelope, make_command
from psplay.domain.errors import MalformedPayload, UnknownKeyword
from psplay.domain.payload import ClassValue, EnumValue, ObjectValue, PathValue
from psplay.domain.references import (
    Reference,
    ReferenceWrapper,
    by_class,
    by_index,
    by_property,
    chain,
    require_domain,
)

DOMAIN = "document"


class DocumentReferences(ReferenceWrapper):
    """Document reference constructors, plus file paths."""

    def path(self, path: str) -> PathValue:
        """A document on disk, for :func:`open`."""
        return PathValue(path)


reference_by = DocumentReferences(DOMAIN)

CROP_TO = frozen_table(
    {
        "bounding": "boundingBox",
        "media": "mediaBox",
        "crop": "cropBox",
        "bleed": "bleedBox",
        "trim": "trimBox",
        "art": "artBox",
    }
)

COLOR_MODES = frozen_table(
    {
        "rgb": "RGBColorMode",
        "gray": "grayscaleMode",
        "cmyk": "CMYKColorMode",
        "lab": "labColorMode",
    }
)

PNG_COMPRESSION = frozen_table({"none": 0, "smallest": 9})

PNG_INTERLACE = frozen_table({"none": "PNGInterlaceNone", "interlaced": "PNGInterlaceAdam7"})

GIF_COLOR_PALETTE = frozen_table(
    {
        "exact": "exact",
        "mac": "macintoshSystem",
        "window": "windowsSystem",
        "web": "web",
        "localPerceptual": "perceptual",
        "localSelective": "selective",
        "localAdaptive": "adaptive",
        "previous": "previous",
    }
)

GIF_ROW_ORDER = frozen_table({"normal": False, "interlaced": True})

GIF_FORCED_COLORS = frozen_table(
    {
        "none": "none",
        "blackAndWhite": "blackAndWhite",
        "primaries": "primaries",
        "web": "web",
    }
)

# Formats opened through the PDF import dialog
_PDF_LIKE = frozenset({"ai", "pdf"})


class OpenSettings(BaseModel):
    """Import options for PDF-like files (``.ai``, ``.pdf``)."""

    model_config = {"frozen": True}

    pdf_selection: Literal["page", "image"] = "page"
    page_number: int = 1
    suppress_warnings: bool = False
    name: str | None = None
    bit_depth: Literal[8, 16] = 8
    box: str = "bounding"
    anti_alias: bool = True
    constrain_proportions: bool = True
    width: float | None = None
    height: float | None = None
    color_mode: str = "rgb"
    resolution: float = 72


class SaveSettings(BaseModel):
    """Per-format save options; only the ones for the target format apply."""

    model_config = {"frozen": True}

    gif_color_palette: str = "exact"
    gif_row_order: str = "normal"
    gif_forced_colors: str = "blackAndWhite"
    gif_transparency: bool = True
    jpg_extended_quality: int = 8
    png_compression: str = "none"
    png_interlace: str = "none"
    embed_profiles: bool = False


class CreateSettings(BaseModel):
    """New document options. Width and height are distance units."""

    model_config = {"frozen": True}

    width: float = 7
    height: float = 5
    resolution: float = 72
    fill: Literal["white", "backgroundColor", "transparency"] = "white"
    color_mode: str = "RGBColorMode"
    depth: int = 8
    color_profile: str = "none"
    pixel_aspect_ratio: float = 1


def _extension(path: str) -> str:
    return PurePosixPath(path).suffix.removeprefix(".").lower()


def open(  # noqa: A001
    path: str, settings: OpenSettings | Mapping[str, Any] | None = None
) -> CommandEnvelope:
    """Open a document (psd, png, jpg, gif, ai, pdf).

    PDF-like files carry a ``PDFGenericFormat`` import descriptor built
    from *settings*; page imports also carry size, mode and resolution.
    """
    settings = OpenSettings.model_validate(settings or {})
    payload: dict[str, Any] = {"null": PathValue(path)}
    if _extension(path) in _PDF_LIKE:
        fields: dict[str, Any] = {
            "selection": EnumValue("pdfSelection", settings.pdf_selection),
            "suppressWarnings": settings.suppress_warnings,
            "pageNumber": settings.page_number,
        }
        if settings.pdf_selection == "page":
            fields |= {
                "antiAlias": settings.anti_alias,
                "constrainProportions": settings.constrain_proportions,
                "crop": EnumValue("cropTo", lookup(CROP_TO, settings.box, "crop box")),
                "depth": settings.bit_depth,
                "mode": EnumValue(
                    "colorSpace", lookup(COLOR_MODES, settings.color_mode, "color mode")
                ),
                "name": settings.name or PurePosixPath(path).stem,
                "resolution": units.density(settings.resolution),
            }
            if settings.width is not None:
                fields["width"] = units.pixels(settings.width)
            if settings.height is not None:
                fields["height"] = units.pixels(settings.height)
        payload["as"] = ObjectValue("PDFGenericFormat", fields)
    return make_command("open", payload)


def close(
    document_id: int, saving: Literal["yes", "no", "ask"] | None = None
) -> CommandEnvelope:
    """Close a document. Saving requires a previously saved file path."""
    payload: dict[str, Any] = {"documentID": document_id}
    if saving is not None:
        payload["saving"] = EnumValue("yesNo", saving)
    return make_command("close", payload)


def _save_format(file_type: str, settings: SaveSettings) -> ObjectValue:
    if file_type == "gif":
        return ObjectValue(
            "GIFFormat",
            {
                "interfaceIconFrameDimmed": lookup(
                    GIF_ROW_ORDER, settings.gif_row_order, "gif row order"
                )
            },
        )
    if file_type == "psd":
        return ObjectValue("photoshop35Format", {})
    if file_type in ("jpg", "jpeg"):
        return ObjectValue(
            "JPEG",
            {
                "extendedQuality": settings.jpg_extended_quality,
                "matteColor": EnumValue("matteColor", "none"),
            },
        )
    if file_type == "png":
        return ObjectValue(
            "PNGFormat",
            {
                "PNGInterlaceType": EnumValue(
                    "PNGInterlaceType",
                    lookup(PNG_INTERLACE, settings.png_interlace, "png interlace"),
                ),
                "compression": lookup(PNG_COMPRESSION, settings.png_compression, "png compression"),
            },
        )
    raise UnknownKeyword("save format", file_type)


def save(path: str, settings: SaveSettings | Mapping[str, Any] | None = None) -> CommandEnvelope:
    """Save the current document to *path*; the format follows the extension.

    GIF is saved as an indexed-color copy.

    Raises:
        UnknownKeyword: For extensions other than gif, psd, jpg/jpeg, png.
    """
    settings = SaveSettings.model_validate(settings or {})
    file_type = _extension(path)
    payload: dict[str, Any] = {
        "as": _save_format(file_type, settings),
        "in": PathValue(path),
    }
    if file_type == "gif":
        payload["to"] = ObjectValue(
            "indexedColorMode",
            {
                "palette": EnumValue(
                    "colorPalette",
                    lookup(GIF_COLOR_PALETTE, settings.gif_color_palette, "gif color palette"),
                ),
                "forcedColors": EnumValue(
                    "forcedColors",
                    lookup(GIF_FORCED_COLORS, settings.gif_forced_colors, "gif forced colors"),
                ),
                "transparency": settings.gif_transparency,
            },
        )
        payload["copy"] = True
    else:
        payload["embedProfiles"] = settings.embed_profiles
    return make_command("save", payload)


def select(ref: Reference) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "select")
    return make_command("select", {"null": ref})


def create(settings: CreateSettings | Mapping[str, Any] | None = None) -> CommandEnvelope:
    """Create a new document."""
    settings = CreateSettings.model_validate(settings or {})
    return make_command(
        "make",
        {
            "new": ObjectValue(
                "document",
                {
                    "width": units.distance(settings.width),
                    "height": units.distance(settings.height),
                    "resolution": units.density(settings.resolution),
                    "fill": EnumValue("fill", settings.fill),
                    "mode": ClassValue(settings.color_mode),
                    "depth": settings.depth,
                    "profile": settings.color_profile,
                    "pixelScaleFactor": settings.pixel_aspect_ratio,
                },
            )
        },
    )


def create_with_preset(preset_name: str) -> CommandEnvelope:
    return make_command("make", {"new": ObjectValue("document", {"preset": preset_name})})


def resize(
    width: units.UnitValue | float,
    height: units.UnitValue | float,
    horizontal: str = "center",
    vertical: str = "center",
) -> CommandEnvelope:
    """Resize the canvas of the current document.

    Args:
        width: New width; bare numbers are pixels.
        height: New height; bare numbers are pixels.
        horizontal: Horizontal anchor for the extension.
        vertical: Vertical anchor for the extension.
    """
    if not isinstance(width, units.UnitValue):
        width = units.pixels(width)
    if not isinstance(height, units.UnitValue):
        height = units.pixels(height)
    return make_command(
        "canvasSize",
        {
            "canvasExtensionColorType": EnumValue("canvasExtensionColorType", "backgroundColor"),
            "height": height,
            "width": width,
            "horizontal": EnumValue("horizontalLocation", horizontal),
            "vertical": EnumValue("verticalLocation", vertical),
        },
    )


def set_target_path_visible(ref: Reference, enabled: bool) -> CommandEnvelope:
    """Toggle View > Extras > Show > Target Path."""
    require_domain(ref, DOMAIN, "set_target_path_visible")
    return make_command(
        "set",
        {
            "null": chain(by_property("targetPathVisibility"), ref),
            "to": enabled,
        },
    )


def insert_guide(
    ref: Reference,
    orientation: Literal["horizontal", "vertical"],
    position: float,
    is_artboard_guide: bool = False,
) -> CommandEnvelope:
    """Create a guide at *position* pixels.

    Args:
        ref: Document to add the guide to.
        orientation: Guide orientation.
        position: Offset in pixels.
        is_artboard_guide: Target the selected artboard instead of the document.
    """
    require_domain(ref, DOMAIN, "insert_guide")
    target = "guideTargetSelectedArtboard" if is_artboard_guide else "guideTargetDocument"
    return make_command(
        "newGuide",
        {
            "null": by_class("guide"),
            "new": ObjectValue(
                "guide",
                {
                    "null": chain(ref, by_class("guide")),
                    "orientation": EnumValue("orientation", orientation),
                    "position": units.pixels(position),
                },
            ),
            "guideTarget": EnumValue("guideTarget", target),
        },
    )


def remove_guide(ref: Reference, guide_index: int) -> CommandEnvelope:
    require_domain(ref, DOMAIN, "remove_guide")
    return make_command("delete", {"null": chain(by_index("guide", guide_index), ref)})


def set_artboard_auto_attributes(ref: Reference, **attributes: bool) -> CommandEnvelope:
    """Set artboard automation flags (artboard tool gear menu).

    Accepted flags: ``autoNestEnabled``, ``autoPositionEnabled``,
    ``autoExpandEnabled``.

    Raises:
        MalformedPayload: If no attribute is given.
    """
    require_domain(ref, DOMAIN, "set_artboard_auto_attributes")
    if not attributes:
        raise MalformedPayload("set_artboard_auto_attributes requires at least one attribute")
    return make_command(
        "set",
        {
            "null": chain(by_property("artboards"), ref),
            "to": attributes,
        },
    )


def _guides_reference(guide_type: str) -> Reference:
    return chain(by_property(guide_type), reference_by.target)


def get_guides_visibility() -> CommandEnvelope:
    return make_command("get", {"null": _guides_reference("guidesVisibility")})


def get_smart_guides_visibility() -> CommandEnvelope:
    return make_command("get", {"null": _guides_reference("smartGuidesVisibility")})


def set_guides_visibility(enabled: bool) -> CommandEnvelope:
    return make_command("set", {"null": _guides_reference("guidesVisibility"), "to": enabled})


def set_smart_guides_visibility(enabled: bool) -> CommandEnvelope:
    return make_command(
        "set", {"null": _guides_reference("smartGuidesVisibility"), "to": enabled}
    )


def _extension_data_reference(doc: int | Reference, namespace: str) -> Reference:
    if isinstance(doc, int) and not isinstance(doc, bool):
        doc = reference_by.by_id(doc)
    else:
        require_domain(doc, DOMAIN, "extension data")
    return chain(
        by_property(namespace, domain=None),
        by_property("documentExtensionData", domain=None),
        doc,
    )


def get_extension_data(doc: int | Reference, namespace: str) -> CommandEnvelope:
    """Read every key in an extension data namespace.

    Args:
        doc: Document id or document reference.
        namespace: Top-level property within ``documentExtensionData``.
    """
    return make_command("get", {"null": _extension_data_reference(doc, namespace)})


def set_extension_data(
    doc: int | Reference, namespace: str, key: str, value: Any
) -> CommandEnvelope:
    """Write one key/value pair into an extension data namespace."""
    return make_command(
        "set",
        {
            "null": _extension_data_reference(doc, namespace),
            "to": {key: value},
        },
    )
