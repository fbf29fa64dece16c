"""Descriptor payload tree — a closed set of value variants.

A payload value is exactly one of:

- primitive: ``str``, ``int``, ``float``, ``bool``, ``None``
- :class:`~psplay.domain.units.UnitValue`
- a reference (:class:`~psplay.domain.references.RefNode` / ``RefChain``)
- a typed value: :class:`ObjectValue`, :class:`EnumValue`,
  :class:`ClassValue`, :class:`PathValue`
- a nested :class:`Descriptor` (untagged mapping)
- a ``tuple`` of values (ordered)

Builders may write plain ``dict``/``list`` literals; :func:`normalize`
turns them into immutable ``Descriptor``/``tuple`` and rejects anything
outside the variant set. Equality follows from the containers: mapping
key order never matters, sequence order always does.

The wire form is the open JSON-like shape the host consumes, with
underscore-prefixed discriminator keys.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from psplay.domain.errors import MalformedPayload
from psplay.domain.references import RefChain, RefNode, reference_from_wire
from psplay.domain.units import UnitKind, UnitValue


def _strict_key(value: Any) -> Any:
    # True == 1 in Python but not on the wire
    if isinstance(value, bool):
        return (bool, value)
    if isinstance(value, tuple):
        return tuple(_strict_key(item) for item in value)
    return value


class Descriptor(Mapping[str, Any]):
    """Immutable, hashable property mapping.

    Construct through :func:`normalize` (or :func:`descriptor`) so that
    nested values are checked and frozen. Equality is type-strict for
    booleans, so ``{"to": True}`` and ``{"to": 1}`` differ.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items: dict[str, Any] = dict(items or {})

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _keyed(self) -> dict[str, Any]:
        return {key: _strict_key(value) for key, value in self._items.items()}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Descriptor):
            return self._keyed() == other._keyed()
        if isinstance(other, Mapping):
            return self._keyed() == {key: _strict_key(value) for key, value in other.items()}
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._keyed().items()))

    def __repr__(self) -> str:
        return f"Descriptor({self._items!r})"

    def to_wire(self) -> dict[str, Any]:
        return {key: to_wire(value) for key, value in self._items.items()}


def _require_str(value: Any, what: str) -> None:
    if not isinstance(value, str):
        raise MalformedPayload(f"{what} must be a string, got {value!r}")


@dataclass(frozen=True, slots=True, eq=False)
class EnumValue:
    """``{"_enum": enum_type, "_value": value}``"""

    enum_type: str
    value: Any

    def __post_init__(self) -> None:
        _require_str(self.enum_type, "enum type")
        if not (self.value is None or isinstance(self.value, (str, bool, int, float))):
            raise MalformedPayload(f"{self.enum_type} value must be a primitive, got {self.value!r}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise MalformedPayload(f"non-finite {self.enum_type} value")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumValue):
            return NotImplemented
        return (self.enum_type, _strict_key(self.value)) == (other.enum_type, _strict_key(other.value))

    def __hash__(self) -> int:
        return hash((self.enum_type, _strict_key(self.value)))

    def to_wire(self) -> dict[str, Any]:
        return {"_enum": self.enum_type, "_value": self.value}


@dataclass(frozen=True, slots=True)
class ClassValue:
    """``{"_class": name}``"""

    name: str

    def __post_init__(self) -> None:
        _require_str(self.name, "class name")

    def to_wire(self) -> dict[str, Any]:
        return {"_class": self.name}


@dataclass(frozen=True, slots=True)
class PathValue:
    """``{"_path": path}``, a file system path."""

    path: str

    def __post_init__(self) -> None:
        _require_str(self.path, "path")

    def to_wire(self) -> dict[str, Any]:
        return {"_path": self.path}


@dataclass(frozen=True, slots=True, init=False)
class ObjectValue:
    """``{"_obj": cls, "_value": {...}}``: a descriptor tagged with its class."""

    cls: str
    fields: Descriptor

    def __init__(self, cls: str, fields: Mapping[str, Any] | None = None) -> None:
        _require_str(cls, "object class")
        if fields is not None and not isinstance(fields, Mapping):
            raise MalformedPayload(f"{cls} fields must be a mapping, got {type(fields).__name__}")
        object.__setattr__(self, "cls", cls)
        object.__setattr__(self, "fields", descriptor(fields or {}, where=cls))

    def to_wire(self) -> dict[str, Any]:
        return {"_obj": self.cls, "_value": self.fields.to_wire()}


_TAGGED = (UnitValue, RefNode, RefChain, EnumValue, ClassValue, PathValue, ObjectValue, Descriptor)


def normalize(value: Any, *, where: str = "payload") -> Any:
    """Check *value* against the variant set and freeze containers.

    Raises:
        MalformedPayload: For unsupported types, non-string keys, or
            non-finite floats.
    """
    if isinstance(value, _TAGGED):
        return value
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedPayload(f"non-finite number at {where}")
        return value
    if isinstance(value, Mapping):
        return descriptor(value, where=where)
    if isinstance(value, (list, tuple)):
        return tuple(normalize(item, where=f"{where}[{i}]") for i, item in enumerate(value))
    raise MalformedPayload(f"unsupported value at {where}: {type(value).__name__}")


def descriptor(items: Mapping[str, Any], *, where: str = "payload") -> Descriptor:
    """Build a :class:`Descriptor` from a mapping, normalizing every value."""
    if isinstance(items, Descriptor):
        return items
    frozen: dict[str, Any] = {}
    for key, value in items.items():
        if not isinstance(key, str):
            raise MalformedPayload(f"non-string key {key!r} at {where}")
        frozen[key] = normalize(value, where=f"{where}.{key}")
    return Descriptor(frozen)


def to_wire(value: Any) -> Any:
    """Serialize a normalized value to plain JSON-compatible data."""
    if isinstance(value, _TAGGED):
        return value.to_wire()
    if isinstance(value, tuple):
        return [to_wire(item) for item in value]
    return value


def from_wire(value: Any, *, where: str = "payload") -> Any:
    """Decode wire data back into payload variants.

    Raises:
        MalformedPayload: If a tagged object is incomplete or malformed,
            or a leaf is outside the variant set.
    """
    if isinstance(value, list):
        return tuple(from_wire(item, where=f"{where}[{i}]") for i, item in enumerate(value))
    if not isinstance(value, Mapping):
        return normalize(value, where=where)
    if "_ref" in value:
        return reference_from_wire(value)
    if "_unit" in value:
        if "_value" not in value:
            raise MalformedPayload(f"unit value at {where} has no _value")
        return UnitValue(UnitKind.from_symbol(value["_unit"]), value["_value"])
    if "_obj" in value:
        return ObjectValue(value["_obj"], from_wire(value.get("_value", {}), where=f"{where}._value"))
    if "_enum" in value:
        return EnumValue(value["_enum"], value.get("_value"))
    if "_class" in value:
        return ClassValue(value["_class"])
    if "_path" in value:
        return PathValue(value["_path"])
    decoded = {key: from_wire(item, where=f"{where}.{key}") for key, item in value.items()}
    return descriptor(decoded, where=where)


def iter_references(value: Any) -> Iterator[RefNode | RefChain]:
    """Yield every reference inside *value*, depth first."""
    if isinstance(value, (RefNode, RefChain)):
        yield value
    elif isinstance(value, ObjectValue):
        yield from iter_references(value.fields)
    elif isinstance(value, Descriptor):
        for item in value.values():
            yield from iter_references(item)
    elif isinstance(value, tuple):
        for item in value:
            yield from iter_references(item)
