"""Tests for reference construction, classification and wire decoding."""

from __future__ import annotations

import pytest

from psplay.domain import references as refs
from psplay.domain.errors import InvalidReferenceKind, MalformedPayload, UnknownKeyword
from psplay.domain.references import RefChain, RefForm, RefNode


class TestNodeWire:
    def test_by_id(self) -> None:
        assert refs.by_id("layer", 7).to_wire() == {"_ref": "layer", "_id": 7}

    def test_by_index(self) -> None:
        assert refs.by_index("document", 1).to_wire() == {"_ref": "document", "_index": 1}

    def test_by_name(self) -> None:
        assert refs.by_name("layer", "Background").to_wire() == {
            "_ref": "layer",
            "_name": "Background",
        }

    def test_by_ordinal(self) -> None:
        assert refs.by_ordinal("layer", "target").to_wire() == {
            "_ref": "layer",
            "_enum": "ordinal",
            "_value": "targetEnum",
        }

    def test_current_and_target_are_the_same_node(self) -> None:
        assert refs.by_ordinal("layer", "current") == refs.by_ordinal("layer", "target")

    @pytest.mark.parametrize("keyword", ["front", "back", "first", "last", "next", "previous"])
    def test_positional_ordinals(self, keyword: str) -> None:
        assert refs.by_ordinal("layer", keyword).value == keyword

    def test_unknown_ordinal(self) -> None:
        with pytest.raises(UnknownKeyword):
            refs.by_ordinal("layer", "sideways")

    def test_by_enum(self) -> None:
        assert refs.by_enum("path", "path", "vectorMask").to_wire() == {
            "_ref": "path",
            "_enum": "path",
            "_value": "vectorMask",
        }

    def test_by_property(self) -> None:
        assert refs.by_property("guidesVisibility").to_wire() == {
            "_ref": "property",
            "_property": "guidesVisibility",
        }

    def test_by_property_without_domain(self) -> None:
        assert refs.by_property("vectorToolMode", domain=None).to_wire() == {
            "_ref": None,
            "_property": "vectorToolMode",
        }

    def test_by_class(self) -> None:
        assert refs.by_class("layerSection").to_wire() == {"_ref": "layerSection"}

    @pytest.mark.parametrize("value", [[1], {"id": 1}, float("nan"), object()])
    def test_selector_value_must_be_primitive(self, value: object) -> None:
        with pytest.raises(MalformedPayload):
            refs.by_id("layer", value)  # type: ignore[arg-type]

    def test_domain_must_be_string(self) -> None:
        with pytest.raises(MalformedPayload):
            RefNode(RefForm.ID, ["layer"], 1)  # type: ignore[arg-type]

    def test_bool_selector_is_not_int(self) -> None:
        assert refs.by_id("layer", True) != refs.by_id("layer", 1)
        assert len({refs.by_id("layer", True), refs.by_id("layer", 1)}) == 2
        assert refs.by_id("layer", 1) == refs.by_id("layer", 1)

    def test_index_is_not_validated(self) -> None:
        assert refs.by_index("layer", 0).value == 0


class TestChain:
    def test_innermost_first_order(self) -> None:
        ref = refs.chain(refs.by_property("guidesVisibility"), refs.by_ordinal("document", "target"))
        assert ref.to_wire() == {
            "_ref": [
                {"_ref": "property", "_property": "guidesVisibility"},
                {"_ref": "document", "_enum": "ordinal", "_value": "targetEnum"},
            ]
        }

    def test_domain_is_outermost_node(self) -> None:
        ref = refs.chain(refs.by_enum("path", "path", "vectorMask"), refs.by_ordinal("layer", "target"))
        assert ref.domain == "layer"
        assert refs.domain_of(ref) == "layer"

    def test_single_node_chain_differs_from_bare_node(self) -> None:
        node = refs.by_class("path")
        assert refs.chain(node) != node
        assert refs.chain(node).to_wire() == {"_ref": [{"_ref": "path"}]}

    def test_nested_chains_flatten(self) -> None:
        doc = refs.chain(refs.by_property("documentExtensionData", None), refs.by_id("document", 3))
        ref = refs.chain(refs.by_property("ns", None), doc)
        assert len(ref.nodes) == 3

    def test_empty_chain(self) -> None:
        with pytest.raises(MalformedPayload):
            refs.chain()

    def test_chain_type_rejects_empty_nodes(self) -> None:
        with pytest.raises(MalformedPayload):
            RefChain(())

    def test_non_reference_in_chain(self) -> None:
        with pytest.raises(MalformedPayload):
            refs.chain({"_ref": "layer"})  # type: ignore[arg-type]


class TestClassification:
    def test_is_reference(self) -> None:
        assert refs.is_reference(refs.by_id("layer", 1))
        assert refs.is_reference(refs.chain(refs.by_id("layer", 1)))
        assert not refs.is_reference({"_ref": "layer", "_id": 1})

    def test_domain_of_non_reference(self) -> None:
        with pytest.raises(TypeError):
            refs.domain_of("layer")  # type: ignore[arg-type]

    def test_require_domain_accepts_match(self) -> None:
        refs.require_domain(refs.by_id("layer", 1), "layer", "hide")

    def test_require_domain_rejects_mismatch(self) -> None:
        with pytest.raises(InvalidReferenceKind) as exc_info:
            refs.require_domain(refs.by_id("document", 1), "layer", "hide")
        err = exc_info.value
        assert (err.operation, err.expected, err.actual) == ("hide", "layer", "document")
        assert "hide is passed a non-layer reference" in str(err)

    def test_require_domain_rejects_non_reference(self) -> None:
        with pytest.raises(InvalidReferenceKind):
            refs.require_domain(7, "layer", "hide")


class TestFromWire:
    @pytest.mark.parametrize(
        "ref",
        [
            refs.by_id("layer", 7),
            refs.by_name("layer", "Sky"),
            refs.by_index("document", 2),
            refs.by_ordinal("layer", "front"),
            refs.by_enum("path", "path", "vectorMask"),
            refs.by_property("workPath", domain="path"),
            refs.by_class("guide"),
            refs.chain(refs.by_property("artboards"), refs.by_id("document", 1)),
        ],
    )
    def test_decodes_encoded_reference(self, ref: RefNode | RefChain) -> None:
        assert refs.reference_from_wire(ref.to_wire()) == ref

    @pytest.mark.parametrize(
        "wire",
        [
            {"_ref": []},
            {"_ref": [5]},
            {"_ref": [{"_ref": []}]},
            {"_ref": {"layer": 1}},
            {"_id": 3},
            {"_ref": "layer", "_id": [3]},
        ],
    )
    def test_rejects_malformed_wire(self, wire: dict) -> None:
        with pytest.raises(MalformedPayload):
            refs.reference_from_wire(wire)

    def test_ordinal_form(self) -> None:
        node = refs.node_from_wire({"_ref": "layer", "_enum": "ordinal", "_value": "targetEnum"})
        assert node.form is RefForm.ORDINAL


class TestReferenceWrapper:
    def test_bound_constructors(self) -> None:
        layer = refs.wrapper("layer")
        assert layer.by_id(4) == refs.by_id("layer", 4)
        assert layer.by_name("a") == refs.by_name("layer", "a")
        assert layer.by_index(2) == refs.by_index("layer", 2)
        assert layer.by_ordinal("back") == refs.by_ordinal("layer", "back")
        assert layer.by_class() == refs.by_class("layer")

    def test_target_and_current(self) -> None:
        layer = refs.wrapper("layer")
        assert layer.target == layer.current == refs.by_ordinal("layer", "target")
