"""Tests for shared shape descriptor fragments."""

from __future__ import annotations

import pytest

from psplay.builders import shape
from psplay.domain import units
from psplay.domain.errors import MalformedPayload, UnknownKeyword


class TestRgbColor:
    def test_from_sequence(self) -> None:
        assert shape.rgb_color([10, 20, 30]).to_wire() == {
            "_obj": "RGBColor",
            "_value": {"red": 10, "grain": 20, "blue": 30},
        }

    def test_from_mapping_ignores_alpha(self) -> None:
        color = shape.rgb_color({"r": 1, "g": 2, "b": 3, "a": 0.5})
        assert dict(color.fields) == {"red": 1, "grain": 2, "blue": 3}

    def test_missing_channel(self) -> None:
        with pytest.raises(MalformedPayload, match="'b'"):
            shape.rgb_color({"r": 1, "g": 2})

    def test_short_sequence(self) -> None:
        with pytest.raises(MalformedPayload):
            shape.rgb_color([1, 2])

    @pytest.mark.parametrize("color", [5, 3.5, "abc", None])
    def test_rejects_non_color(self, color: object) -> None:
        with pytest.raises(MalformedPayload, match="channel list or mapping"):
            shape.rgb_color(color)  # type: ignore[arg-type]

    @pytest.mark.parametrize("color", [["a", "b", "c"], [1, 2, True], {"r": 1, "g": None, "b": 3}])
    def test_rejects_non_numeric_channels(self, color: object) -> None:
        with pytest.raises(MalformedPayload, match="finite number"):
            shape.rgb_color(color)  # type: ignore[arg-type]

    def test_tuple_and_float_channels(self) -> None:
        assert dict(shape.rgb_color((0.5, 1, 2.5, 0.1)).fields) == {"red": 0.5, "grain": 1, "blue": 2.5}


class TestFillContents:
    def test_solid_color(self) -> None:
        content = shape.fill_contents("solidColorLayer", [0, 0, 0])
        assert content.cls == "solidColorLayer"
        assert content.fields["color"] == shape.rgb_color([0, 0, 0])

    def test_pattern(self) -> None:
        content = shape.fill_contents("patternLayer", ("abc", "Bubbles"))
        assert content.fields["pattern"].to_wire() == {
            "_obj": "pattern",
            "_value": {"ID": "abc", "name": "Bubbles"},
        }

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnknownKeyword):
            shape.fill_contents("gradientLayer", None)


class TestToggles:
    def test_shape_fill(self) -> None:
        assert dict(shape.shape_fill(False).fields) == {"fillEnabled": False, "strokeStyleVersion": 2}

    def test_shape_stroke(self) -> None:
        assert dict(shape.shape_stroke(True).fields) == {"strokeEnabled": True, "strokeStyleVersion": 2}


class TestGeometry:
    def test_ellipse(self) -> None:
        geometry = shape.shape_geometry("ellipse", [1, 2, 3, 4])
        assert geometry.cls == "ellipse"
        assert geometry.fields["top"] == units.pixels(1)
        assert geometry.fields["right"] == units.pixels(4)

    def test_plain_rectangle_has_no_radii(self) -> None:
        geometry = shape.shape_geometry("rectangle", [0, 10, 0, 10])
        assert "topLeft" not in geometry.fields

    def test_unset_radii_are_dropped(self) -> None:
        geometry = shape.shape_geometry("rectangle", [0, 10, 0, 10, -1, -1, -1, -1])
        assert "unitValueQuadVersion" not in geometry.fields

    def test_rounded_rectangle(self) -> None:
        geometry = shape.shape_geometry("rectangle", [0, 10, 0, 10, 5, -1, 2])
        assert geometry.fields["topLeft"] == units.pixels(5)
        assert geometry.fields["topRight"] == units.pixels(0)
        assert geometry.fields["bottomLeft"] == units.pixels(2)
        assert geometry.fields["bottomRight"] == units.pixels(0)
        assert geometry.fields["unitValueQuadVersion"] == 1

    def test_too_few_values(self) -> None:
        with pytest.raises(MalformedPayload):
            shape.shape_geometry("ellipse", [1, 2, 3])

    def test_unknown_shape(self) -> None:
        with pytest.raises(UnknownKeyword):
            shape.shape_geometry("triangle", [1, 2, 3, 4])
