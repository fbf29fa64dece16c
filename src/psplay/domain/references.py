"""Reference resolution — naming host objects inside a descriptor.

A reference is either a single selector node or a chain of nodes listed
innermost-first. Wire shapes:

- by id        ``{"_ref": "layer", "_id": 7}``
- by index     ``{"_ref": "layer", "_index": 3}`` (1-based)
- by name      ``{"_ref": "layer", "_name": "Background"}``
- by ordinal   ``{"_ref": "layer", "_enum": "ordinal", "_value": "targetEnum"}``
- by enum      ``{"_ref": "path", "_enum": "path", "_value": "vectorMask"}``
- by property  ``{"_ref": "property", "_property": "guidesVisibility"}``
- by class     ``{"_ref": "layerSection"}``
- chain        ``{"_ref": [node, node, ...]}``

INVARIANT: every reference reports a domain. A chain resolves to the
domain of its outermost (last) node, so "the vector mask of the current
layer" is a layer reference.

The resolver accepts selector values as given; whether an id or index
exists is only knowable by the host.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from psplay.domain.errors import InvalidReferenceKind, MalformedPayload, UnknownKeyword

logger = logging.getLogger(__name__)


class RefForm(StrEnum):
    """How a node selects its target."""

    ID = "id"
    INDEX = "index"
    NAME = "name"
    ORDINAL = "ordinal"
    ENUM = "enum"
    PROPERTY = "property"
    CLASS = "class"


# Ordinal keyword -> host symbol. "current" and "target" both name the
# targeted instance.
ORDINALS: Mapping[str, str] = MappingProxyType(
    {
        "front": "front",
        "back": "back",
        "first": "first",
        "last": "last",
        "target": "targetEnum",
        "current": "targetEnum",
        "next": "next",
        "previous": "previous",
        "none": "none",
    }
)

_SELECTOR_KEYS: Mapping[RefForm, str] = MappingProxyType(
    {
        RefForm.ID: "_id",
        RefForm.INDEX: "_index",
        RefForm.NAME: "_name",
        RefForm.PROPERTY: "_property",
    }
)


def _check_primitive(value: Any, where: str) -> None:
    if value is None or isinstance(value, (str, bool, int)):
        return
    if isinstance(value, float) and math.isfinite(value):
        return
    raise MalformedPayload(f"{where} must be a string, number, bool or None, got {value!r}")


@dataclass(frozen=True, slots=True, eq=False)
class RefNode:
    """A single selector node.

    Equality keeps ``True`` apart from ``1``: they serialize differently.

    Attributes:
        form: Selection kind.
        domain: Class being selected (``"layer"``, ``"document"``...).
            ``None`` is allowed for bare property nodes.
        value: Selector payload: id, index, name, ordinal symbol, enum
            value or property name. Unused for class nodes.
        enum_type: Enumeration type for ordinal/enum nodes.
    """

    form: RefForm
    domain: str | None
    value: Any = None
    enum_type: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.form, RefForm):
            raise MalformedPayload(f"unknown reference form {self.form!r}")
        if self.domain is not None and not isinstance(self.domain, str):
            raise MalformedPayload(f"reference domain must be a string, got {self.domain!r}")
        if self.enum_type is not None and not isinstance(self.enum_type, str):
            raise MalformedPayload(f"reference enum type must be a string, got {self.enum_type!r}")
        _check_primitive(self.value, f"{self.form} selector")

    def _key(self) -> tuple[Any, ...]:
        return (self.form, self.domain, type(self.value) is bool, self.value, self.enum_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefNode):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {"_ref": self.domain}
        if self.form in (RefForm.ORDINAL, RefForm.ENUM):
            wire["_enum"] = self.enum_type
            wire["_value"] = self.value
        elif self.form is not RefForm.CLASS:
            wire[_SELECTOR_KEYS[self.form]] = self.value
        return wire


@dataclass(frozen=True, slots=True)
class RefChain:
    """Ordered nodes, innermost first. Never empty."""

    nodes: tuple[RefNode, ...]

    def __post_init__(self) -> None:
        if not self.nodes:
            raise MalformedPayload("a reference chain needs at least one node")
        for node in self.nodes:
            if not isinstance(node, RefNode):
                raise MalformedPayload(f"chain nodes must be RefNode, got {type(node).__name__}")

    @property
    def domain(self) -> str | None:
        return self.nodes[-1].domain

    def to_wire(self) -> dict[str, Any]:
        return {"_ref": [node.to_wire() for node in self.nodes]}


type Reference = RefNode | RefChain


# --- Constructors ---


def by_id(domain: str, id_: int) -> RefNode:
    return RefNode(RefForm.ID, domain, id_)


def by_index(domain: str, index: int) -> RefNode:
    """Select by 1-based position."""
    return RefNode(RefForm.INDEX, domain, index)


def by_name(domain: str, name: str) -> RefNode:
    return RefNode(RefForm.NAME, domain, name)


def by_ordinal(domain: str, keyword: str) -> RefNode:
    """Select by ordinal keyword (``target``, ``front``, ``next``...).

    Raises:
        UnknownKeyword: If *keyword* is not in :data:`ORDINALS`.
    """
    symbol = ORDINALS.get(keyword)
    if symbol is None:
        raise UnknownKeyword("ordinal", keyword)
    return RefNode(RefForm.ORDINAL, domain, symbol, "ordinal")


def by_enum(domain: str, enum_type: str, value: str) -> RefNode:
    """Select by an arbitrary enumerated value, e.g. the vector mask path."""
    return RefNode(RefForm.ENUM, domain, value, enum_type)


def by_property(name: str, domain: str | None = "property") -> RefNode:
    """Select a named property. Pair with a following node naming its owner."""
    return RefNode(RefForm.PROPERTY, domain, name)


def by_class(domain: str) -> RefNode:
    """Select a class with no instance selector."""
    return RefNode(RefForm.CLASS, domain)


def chain(*refs: Reference) -> RefChain:
    """Compose references innermost-first.

    Embedded chains are flattened, so ``chain(by_property("x"), doc_ref)``
    works whether *doc_ref* is a node or already a chain.
    """
    nodes: list[RefNode] = []
    for ref in refs:
        if isinstance(ref, RefChain):
            nodes.extend(ref.nodes)
        elif isinstance(ref, RefNode):
            nodes.append(ref)
        else:
            raise MalformedPayload(f"chain() expects reference nodes, got {type(ref).__name__}")
    if not nodes:
        raise MalformedPayload("chain() requires at least one node")
    return RefChain(tuple(nodes))


# --- Classification ---


def is_reference(value: Any) -> bool:
    return isinstance(value, (RefNode, RefChain))


def domain_of(ref: Reference) -> str | None:
    """Return the domain a reference ultimately resolves to."""
    if isinstance(ref, (RefNode, RefChain)):
        return ref.domain
    raise TypeError(f"not a reference: {type(ref).__name__}")


def require_domain(ref: Any, expected: str, operation: str) -> None:
    """Fail fast unless *ref* is a reference resolving to *expected*.

    Raises:
        InvalidReferenceKind: On any mismatch, including non-references.
    """
    actual = ref.domain if is_reference(ref) else type(ref).__name__
    if actual != expected:
        logger.debug("Rejected %s reference for %s", actual, operation)
        raise InvalidReferenceKind(operation, expected, actual)


# --- Wire decoding ---


def node_from_wire(data: Any) -> RefNode:
    """Decode one wire selector node.

    Raises:
        MalformedPayload: If *data* is not a ``{"_ref": ...}`` mapping.
    """
    if not isinstance(data, Mapping) or "_ref" not in data:
        raise MalformedPayload(f"not a wire reference node: {data!r}")
    domain = data["_ref"]
    if "_enum" in data:
        form = RefForm.ORDINAL if data["_enum"] == "ordinal" else RefForm.ENUM
        return RefNode(form, domain, data.get("_value"), data["_enum"])
    for form, key in _SELECTOR_KEYS.items():
        if key in data:
            return RefNode(form, domain, data[key])
    return RefNode(RefForm.CLASS, domain)


def reference_from_wire(data: Mapping[str, Any]) -> Reference:
    """Decode a wire reference: a node, or ``{"_ref": [...]}`` chain."""
    inner = data.get("_ref")
    if isinstance(inner, list):
        return chain(*(node_from_wire(node) for node in inner))
    return node_from_wire(data)


# --- Per-domain sugar ---


@dataclass(frozen=True, slots=True)
class ReferenceWrapper:
    """Constructors pre-bound to one domain.

    Usage::

        layer_ref = wrapper("layer")
        layer_ref.target          # current targeted layer(s)
        layer_ref.by_id(42)
    """

    domain: str

    @property
    def current(self) -> RefNode:
        return by_ordinal(self.domain, "current")

    @property
    def target(self) -> RefNode:
        return by_ordinal(self.domain, "target")

    def by_id(self, id_: int) -> RefNode:
        return by_id(self.domain, id_)

    def by_index(self, index: int) -> RefNode:
        return by_index(self.domain, index)

    def by_name(self, name: str) -> RefNode:
        return by_name(self.domain, name)

    def by_ordinal(self, keyword: str) -> RefNode:
        return by_ordinal(self.domain, keyword)

    def by_class(self) -> RefNode:
        return by_class(self.domain)


def wrapper(domain: str) -> ReferenceWrapper:
    return ReferenceWrapper(domain)
