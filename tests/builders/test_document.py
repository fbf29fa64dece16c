"""Tests for document command builders."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from psplay.builders import document
from psplay.builders.document import CreateSettings, OpenSettings, SaveSettings
from psplay.domain.errors import InvalidReferenceKind, MalformedPayload, UnknownKeyword
from psplay.domain.references import by_id
from tests.conftest import target_ref, wire

DOC = document.reference_by.by_id(3)
DOC_WIRE = {"_ref": "document", "_id": 3}


class TestOpen:
    def test_plain_file(self) -> None:
        envelope = document.open("/tmp/photo.psd")
        assert envelope.verb == "open"
        assert wire(envelope) == {"null": {"_path": "/tmp/photo.psd"}}

    @pytest.mark.parametrize("path", ["/tmp/logo.ai", "/tmp/report.PDF"])
    def test_pdf_like_page_import(self, path: str) -> None:
        fmt = wire(document.open(path))["as"]
        assert fmt["_obj"] == "PDFGenericFormat"
        fields = fmt["_value"]
        assert fields["selection"] == {"_enum": "pdfSelection", "_value": "page"}
        assert fields["crop"] == {"_enum": "cropTo", "_value": "boundingBox"}
        assert fields["mode"] == {"_enum": "colorSpace", "_value": "RGBColorMode"}
        assert fields["resolution"] == {"_unit": "densityUnit", "_value": 72}
        assert "width" not in fields

    def test_default_name_is_file_stem(self) -> None:
        fields = wire(document.open("/tmp/logo.ai"))["as"]["_value"]
        assert fields["name"] == "logo"

    def test_image_import_skips_page_fields(self) -> None:
        fields = wire(document.open("/tmp/a.pdf", OpenSettings(pdf_selection="image")))["as"]["_value"]
        assert set(fields) == {"selection", "suppressWarnings", "pageNumber"}

    def test_settings_from_mapping(self) -> None:
        fields = wire(document.open("/tmp/a.pdf", {"width": 800, "box": "trim"}))["as"]["_value"]
        assert fields["width"] == {"_unit": "pixelsUnit", "_value": 800}
        assert fields["crop"]["_value"] == "trimBox"

    def test_unknown_crop_box(self) -> None:
        with pytest.raises(UnknownKeyword):
            document.open("/tmp/a.pdf", OpenSettings(box="poster"))


class TestClose:
    def test_without_saving(self) -> None:
        envelope = document.close(12)
        assert envelope.verb == "close"
        assert wire(envelope) == {"documentID": 12}

    def test_with_saving(self) -> None:
        assert wire(document.close(12, "no"))["saving"] == {"_enum": "yesNo", "_value": "no"}


class TestSave:
    def test_png(self) -> None:
        envelope = document.save("/tmp/out.png")
        assert envelope.verb == "save"
        assert wire(envelope) == {
            "as": {
                "_obj": "PNGFormat",
                "_value": {
                    "PNGInterlaceType": {"_enum": "PNGInterlaceType", "_value": "PNGInterlaceNone"},
                    "compression": 0,
                },
            },
            "in": {"_path": "/tmp/out.png"},
            "embedProfiles": False,
        }

    @pytest.mark.parametrize("path", ["/tmp/out.jpg", "/tmp/out.jpeg"])
    def test_jpeg(self, path: str) -> None:
        fmt = wire(document.save(path, SaveSettings(jpg_extended_quality=12)))["as"]
        assert fmt["_obj"] == "JPEG"
        assert fmt["_value"]["extendedQuality"] == 12

    def test_psd(self) -> None:
        assert wire(document.save("/tmp/out.psd"))["as"] == {"_obj": "photoshop35Format", "_value": {}}

    def test_gif_is_indexed_copy(self) -> None:
        payload = wire(document.save("/tmp/out.gif", {"gif_color_palette": "web"}))
        assert payload["copy"] is True
        assert "embedProfiles" not in payload
        assert payload["to"]["_obj"] == "indexedColorMode"
        assert payload["to"]["_value"]["palette"] == {"_enum": "colorPalette", "_value": "web"}

    def test_unsupported_extension(self) -> None:
        with pytest.raises(UnknownKeyword, match="tiff"):
            document.save("/tmp/out.tiff")


class TestCreate:
    def test_defaults(self) -> None:
        envelope = document.create()
        assert envelope.verb == "make"
        new = wire(envelope)["new"]
        assert new["_obj"] == "document"
        assert new["_value"]["width"] == {"_unit": "distanceUnit", "_value": 7}
        assert new["_value"]["height"] == {"_unit": "distanceUnit", "_value": 5}
        assert new["_value"]["mode"] == {"_class": "RGBColorMode"}
        assert new["_value"]["fill"] == {"_enum": "fill", "_value": "white"}

    def test_height_is_its_own_field(self) -> None:
        new = wire(document.create(CreateSettings(width=10, height=20)))["new"]["_value"]
        assert new["height"]["_value"] == 20

    def test_invalid_fill(self) -> None:
        with pytest.raises(ValidationError):
            document.create({"fill": "plaid"})

    def test_preset(self) -> None:
        assert wire(document.create_with_preset("Web")) == {
            "new": {"_obj": "document", "_value": {"preset": "Web"}}
        }


class TestCanvas:
    def test_resize(self) -> None:
        envelope = document.resize(800, 600, horizontal="left")
        assert envelope.verb == "canvasSize"
        payload = wire(envelope)
        assert payload["width"] == {"_unit": "pixelsUnit", "_value": 800}
        assert payload["horizontal"] == {"_enum": "horizontalLocation", "_value": "left"}
        assert payload["vertical"] == {"_enum": "verticalLocation", "_value": "center"}

    def test_select(self) -> None:
        assert wire(document.select(DOC)) == {"null": DOC_WIRE}

    def test_set_target_path_visible(self) -> None:
        assert wire(document.set_target_path_visible(DOC, True)) == {
            "null": {"_ref": [{"_ref": "property", "_property": "targetPathVisibility"}, DOC_WIRE]},
            "to": True,
        }


class TestGuides:
    def test_insert_guide(self) -> None:
        envelope = document.insert_guide(DOC, "vertical", 120)
        assert envelope.verb == "newGuide"
        payload = wire(envelope)
        assert payload["guideTarget"] == {"_enum": "guideTarget", "_value": "guideTargetDocument"}
        assert payload["new"]["_value"]["position"] == {"_unit": "pixelsUnit", "_value": 120}

    def test_insert_artboard_guide(self) -> None:
        payload = wire(document.insert_guide(DOC, "horizontal", 0, is_artboard_guide=True))
        assert payload["guideTarget"]["_value"] == "guideTargetSelectedArtboard"

    def test_remove_guide(self) -> None:
        assert wire(document.remove_guide(DOC, 2)) == {
            "null": {"_ref": [{"_ref": "guide", "_index": 2}, DOC_WIRE]}
        }

    @pytest.mark.parametrize(
        ("builder", "prop"),
        [
            (document.get_guides_visibility, "guidesVisibility"),
            (document.get_smart_guides_visibility, "smartGuidesVisibility"),
        ],
    )
    def test_get_visibility(self, builder, prop: str) -> None:
        envelope = builder()
        assert envelope.verb == "get"
        assert wire(envelope)["null"] == {
            "_ref": [{"_ref": "property", "_property": prop}, target_ref("document")]
        }

    def test_set_smart_guides_visibility(self) -> None:
        payload = wire(document.set_smart_guides_visibility(False))
        assert payload["to"] is False

    def test_set_guides_visibility(self) -> None:
        envelope = document.set_guides_visibility(True)
        assert envelope.verb == "set"
        assert wire(envelope)["to"] is True


class TestArtboardAttributes:
    def test_set(self) -> None:
        payload = wire(document.set_artboard_auto_attributes(DOC, autoNestEnabled=False))
        assert payload["to"] == {"autoNestEnabled": False}

    def test_requires_attribute(self) -> None:
        with pytest.raises(MalformedPayload):
            document.set_artboard_auto_attributes(DOC)


class TestExtensionData:
    def test_get_by_document_id(self) -> None:
        assert wire(document.get_extension_data(3, "com.example")) == {
            "null": {
                "_ref": [
                    {"_ref": None, "_property": "com.example"},
                    {"_ref": None, "_property": "documentExtensionData"},
                    DOC_WIRE,
                ]
            }
        }

    def test_set_by_reference(self) -> None:
        payload = wire(document.set_extension_data(DOC, "com.example", "count", 2))
        assert payload["to"] == {"count": 2}

    def test_rejects_layer_reference(self) -> None:
        with pytest.raises(InvalidReferenceKind):
            document.get_extension_data(by_id("layer", 3), "com.example")


class TestDomainPrecondition:
    @pytest.mark.parametrize(
        "call",
        [
            lambda ref: document.select(ref),
            lambda ref: document.insert_guide(ref, "vertical", 1),
            lambda ref: document.remove_guide(ref, 1),
            lambda ref: document.set_target_path_visible(ref, True),
            lambda ref: document.set_artboard_auto_attributes(ref, autoNestEnabled=True),
        ],
    )
    def test_layer_reference_rejected(self, call) -> None:
        with pytest.raises(InvalidReferenceKind):
            call(by_id("layer", 1))
