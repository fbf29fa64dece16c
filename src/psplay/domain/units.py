"""Unit-tagged numeric values.

Each quantity the host understands carries its unit on the wire:
``{"_unit": "pixelsUnit", "_value": 12}``. There is one constructor per
unit kind and no conversion between kinds; a width is pixels or
distance, an opacity is percent, a rotation is angle.

Defaulting absent inputs is the builder's job, never the wrapper's.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from psplay.domain.errors import InvalidUnitInput, MalformedPayload


class UnitKind(StrEnum):
    """Unit tags understood by the host."""

    PIXELS = "pixels"
    PERCENT = "percent"
    ANGLE = "angle"
    POINTS = "points"
    DENSITY = "density"
    DISTANCE = "distance"
    NONE = "none"

    @property
    def symbol(self) -> str:
        """Wire symbol, e.g. ``pixelsUnit``."""
        return f"{self.value}Unit"

    @classmethod
    def from_symbol(cls, symbol: Any) -> UnitKind:
        """Parse a wire symbol such as ``angleUnit``.

        Raises:
            MalformedPayload: If *symbol* names no known unit.
        """
        if not isinstance(symbol, str) or not symbol.endswith("Unit"):
            raise MalformedPayload(f"not a unit symbol: {symbol!r}")
        try:
            return cls(symbol.removesuffix("Unit"))
        except ValueError:
            raise MalformedPayload(f"unknown unit symbol: {symbol!r}") from None


@dataclass(frozen=True, slots=True)
class UnitValue:
    """A number tagged with its semantic unit. Immutable."""

    kind: UnitKind
    value: int | float

    def __post_init__(self) -> None:
        if not is_finite_number(self.value):
            raise InvalidUnitInput(str(self.kind), self.value)

    def to_wire(self) -> dict[str, Any]:
        return {"_unit": self.kind.symbol, "_value": self.value}


def is_finite_number(value: Any) -> bool:
    """True for JSON-serializable finite ``int``/``float`` values."""
    # bool is an int subclass but never a quantity
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if not isinstance(value, float):
        return False
    return math.isfinite(value)


def pixels(value: int | float) -> UnitValue:
    return UnitValue(UnitKind.PIXELS, value)


def percent(value: int | float) -> UnitValue:
    return UnitValue(UnitKind.PERCENT, value)


def angle(value: int | float) -> UnitValue:
    """Angle in degrees."""
    return UnitValue(UnitKind.ANGLE, value)


def points(value: int | float) -> UnitValue:
    return UnitValue(UnitKind.POINTS, value)


def density(value: int | float) -> UnitValue:
    """Resolution, pixels per inch."""
    return UnitValue(UnitKind.DENSITY, value)


def distance(value: int | float) -> UnitValue:
    return UnitValue(UnitKind.DISTANCE, value)


def none(value: int | float) -> UnitValue:
    """Unitless quantity that the host still expects unit-wrapped."""
    return UnitValue(UnitKind.NONE, value)
