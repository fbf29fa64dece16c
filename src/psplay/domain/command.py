"""CommandEnvelope — a verb paired with its descriptor payload.

INVARIANT: envelopes are immutable and compare structurally. Two
independently built commands are interchangeable iff their verbs match
and their payload trees are deeply equal (mapping key order ignored,
sequence order significant).

By protocol convention the ``"null"`` key holds the primary target
reference; the envelope does not enforce it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from psplay.domain.errors import MalformedPayload
from psplay.domain.payload import Descriptor, descriptor, from_wire, iter_references
from psplay.domain.references import Reference

logger = logging.getLogger(__name__)


class WireCommand(BaseModel):
    """Payload contract for a command crossing the transport boundary."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(min_length=1)
    descriptor: dict[str, Any]


@dataclass(frozen=True, slots=True)
class CommandEnvelope:
    """One operation to be sent to the host.

    Attributes:
        verb: Host action name (``"set"``, ``"make"``, ``"transform"``...).
        payload: Frozen descriptor tree.
    """

    verb: str
    payload: Descriptor

    @property
    def target(self) -> Any:
        """The conventional primary target (``"null"`` key), if present."""
        return self.payload.get("null")

    def refs(self) -> Iterator[Reference]:
        """Every reference embedded in the payload, depth first."""
        return iter_references(self.payload)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to ``{"command": verb, "descriptor": {...}}``."""
        wire = WireCommand(command=self.verb, descriptor=self.payload.to_wire())
        return wire.model_dump(mode="python")

    @classmethod
    def from_wire(cls, data: Mapping[str, Any]) -> Self:
        """Decode a wire command back into an envelope."""
        wire = WireCommand.model_validate(data)
        return cls(wire.command, from_wire(wire.descriptor))


def make_command(verb: str, payload: Mapping[str, Any]) -> CommandEnvelope:
    """Pair *verb* with *payload*, normalizing the payload tree.

    Raises:
        MalformedPayload: If *verb* is not a non-empty string, *payload*
            is not a mapping, or the tree holds an unsupported value.
    """
    if not isinstance(verb, str) or not verb:
        raise MalformedPayload(f"command verb must be a non-empty string, got {verb!r}")
    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"payload for {verb!r} must be a mapping, got {type(payload).__name__}")
    envelope = CommandEnvelope(verb, descriptor(payload, where=verb))
    logger.debug("Built %s command with %d keys", verb, len(envelope.payload))
    return envelope
