"""Tests for vector mask and work path builders."""

from __future__ import annotations

import pytest

from psplay.builders import vector_mask
from psplay.domain import units
from psplay.domain.references import domain_of
from tests.conftest import target_ref, wire

MASK_NODE = {"_ref": "path", "_enum": "path", "_value": "vectorMask"}
WORK_PATH = {"_ref": [{"_ref": "path", "_property": "workPath"}]}


class TestVectorMaskReference:
    def test_resolves_to_layer(self) -> None:
        assert domain_of(vector_mask.vector_mask_reference()) == "layer"

    def test_wire(self) -> None:
        assert vector_mask.vector_mask_reference().to_wire() == {
            "_ref": [MASK_NODE, target_ref("layer")]
        }


class TestWorkPath:
    def test_make_bounds_work_path(self) -> None:
        bounds = {
            "top": units.pixels(0),
            "left": units.pixels(0),
            "bottom": units.pixels(10),
            "right": units.pixels(20),
        }
        envelope = vector_mask.make_bounds_work_path(bounds)
        assert envelope.verb == "set"
        payload = wire(envelope)
        assert payload["null"] == WORK_PATH
        assert payload["to"]["_obj"] == "rectangle"
        assert payload["to"]["_value"]["right"] == {"_unit": "pixelsUnit", "_value": 20}

    def test_delete_work_path(self) -> None:
        envelope = vector_mask.delete_work_path()
        assert envelope.verb == "delete"
        assert wire(envelope) == {"null": WORK_PATH}

    def test_mask_from_work_path(self) -> None:
        assert wire(vector_mask.make_vector_mask_from_work_path()) == {
            "null": {"_ref": [{"_ref": "path"}]},
            "at": {"_ref": [MASK_NODE]},
            "using": {"_ref": [target_ref("path")]},
        }


class TestMaskCommands:
    @pytest.mark.parametrize(
        ("builder", "verb"),
        [(vector_mask.delete_vector_mask, "delete"), (vector_mask.select_vector_mask, "select")],
    )
    def test_targets_mask_of_current_layer(self, builder, verb: str) -> None:
        envelope = builder()
        assert envelope.verb == verb
        assert wire(envelope) == {"null": {"_ref": [MASK_NODE, target_ref("layer")]}}

    def test_activate_editing(self) -> None:
        envelope = vector_mask.activate_vector_mask_editing()
        assert envelope.verb == "activateVectorMaskEditing"
        assert wire(envelope) == {"null": {"_ref": [target_ref("layer")]}}

    def test_free_transform(self) -> None:
        payload = wire(vector_mask.enter_free_transform_path_mode())
        assert payload["suppressPlayLevelIncrease"] is True
        assert payload["null"]["_ref"][0] == {"_ref": "property", "_property": "freeTransformWholePath"}

    def test_reveal_all(self) -> None:
        payload = wire(vector_mask.create_reveal_all_mask())
        assert payload["using"] == {"_enum": "vectorMaskEnabled", "_value": "revealAll"}
