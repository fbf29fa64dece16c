"""Error taxonomy for descriptor construction.

All errors are raised synchronously at construction time and signal a
programming error by the caller. The domain layer never catches them;
the CLI reports them as errors. A malformed command must never reach
the transport.
"""

from __future__ import annotations

from typing import Any


class PsplayError(Exception):
    """Base class for every error raised by psplay."""


class InvalidReferenceKind(PsplayError, ValueError):
    """A builder received a reference whose domain does not match."""

    def __init__(self, operation: str, expected: str, actual: str | None) -> None:
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation} is passed a non-{expected} reference (got {actual!r})"
        )


class InvalidUnitInput(PsplayError, ValueError):
    """A unit constructor received a non-numeric or non-finite value."""

    def __init__(self, kind: str, value: Any) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind} unit requires a finite number, got {value!r}")


class MalformedPayload(PsplayError, ValueError):
    """A verb, payload tree or wire value falls outside the closed variant set."""


class UnknownKeyword(PsplayError, KeyError):
    """A keyword is not present in one of the builder mapping tables."""

    def __init__(self, table: str, keyword: Any) -> None:
        self.table = table
        self.keyword = keyword
        super().__init__(f"unknown {table} keyword: {keyword!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
