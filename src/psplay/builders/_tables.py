"""Keyword table lookups shared by the builders."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from psplay.domain.errors import UnknownKeyword


def frozen_table[V](items: Mapping[str, V]) -> Mapping[str, V]:
    """Read-only view of a keyword -> host symbol table."""
    return MappingProxyType(dict(items))


def lookup(table: Mapping[str, Any], keyword: Any, what: str) -> Any:
    """Resolve *keyword* in *table*, raising UnknownKeyword if absent."""
    try:
        return table[keyword]
    except (KeyError, TypeError):
        raise UnknownKeyword(what, keyword) from None
