"""Command: run one builder and print its wire command.

Positional ARGS and ``--opt`` values are parsed as JSON when they can
be, so ``12``, ``true``, ``null`` and ``[255, 0, 0]`` arrive typed and
anything else arrives as a string. JSON objects carrying a wire tag
(``_unit``, ``_ref``, ``_obj``...) are decoded into payload values.
"""

from __future__ import annotations

import inspect
import json
from typing import TYPE_CHECKING, Any

import click
import structlog
from pydantic import ValidationError

from psplay.builders.registry import get_operation
from psplay.commands._base import PsplayCommand
from psplay.domain.errors import PsplayError
from psplay.domain.payload import from_wire
from psplay.domain.references import Reference, reference_from_wire, wrapper

if TYPE_CHECKING:
    from psplay.commands._context import AppContext

log = structlog.get_logger(__name__)

_WIRE_TAGS = frozenset({"_unit", "_ref", "_obj", "_enum", "_class", "_path"})


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        if value.keys() & _WIRE_TAGS:
            return from_wire(value)
        return {key: _decode(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_decode(item) for item in value]
    return value


def parse_value(text: str) -> Any:
    """Parse a command-line value: JSON when valid, else the raw string."""
    try:
        return _decode(json.loads(text))
    except json.JSONDecodeError:
        return text


def parse_option(text: str) -> tuple[str, Any]:
    """Split ``KEY=VALUE`` and parse the value."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise click.BadParameter(f"expected KEY=VALUE, got {text!r}", param_hint="--opt")
    return key, parse_value(value)


def parse_ref(domain: str, spec: str) -> Reference:
    """Parse a ``--ref`` selector bound to *domain*.

    Forms: ``id:N``, ``index:N``, ``name:TEXT``, an ordinal keyword
    (``target``, ``front``...), or a JSON wire reference.
    """
    if spec.startswith("{"):
        try:
            return reference_from_wire(json.loads(spec))
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"invalid wire reference: {exc}", param_hint="--ref") from None
    refs = wrapper(domain)
    form, sep, value = spec.partition(":")
    if not sep:
        return refs.by_ordinal(form)
    if form == "name":
        return refs.by_name(value)
    if form in ("id", "index"):
        try:
            number = int(value)
        except ValueError:
            msg = f"{form} must be an integer, got {value!r}"
            raise click.BadParameter(msg, param_hint="--ref") from None
        return refs.by_id(number) if form == "id" else refs.by_index(number)
    raise click.BadParameter(f"unknown selector form {form!r}", param_hint="--ref")


@click.command(
    cls=PsplayCommand,
    examples=[
        ("Hide the targeted layer", "psplay build layer hide --ref target"),
        ("Half-transparent layer 7", "psplay build layer set_opacity 50 --ref id:7"),
        ("Rename by name", "psplay build layer rename --ref name:Background --opt name=Sky"),
        ("Soft round brush", "psplay build brushes set_brush_tip 20 --opt hardness=0"),
        ("One-line output", "psplay build document save /tmp/out.png --compact"),
    ],
)
@click.argument("group")
@click.argument("operation")
@click.argument("args", nargs=-1)
@click.option(
    "--ref",
    "ref_spec",
    default=None,
    help="Leading reference: id:N, index:N, name:TEXT, an ordinal, or wire JSON.",
)
@click.option(
    "--opt", "opts", multiple=True, metavar="KEY=VALUE", help="Keyword argument (repeatable)."
)
@click.option("--compact", is_flag=True, help="Single-line JSON.")
@click.pass_obj
def build(
    app: AppContext,
    group: str,
    operation: str,
    args: tuple[str, ...],
    ref_spec: str | None,
    opts: tuple[str, ...],
    compact: bool,
) -> None:
    """Build GROUP OPERATION with ARGS and print the wire command."""
    try:
        op = get_operation(group, operation)
        positional = [parse_value(arg) for arg in args]
        if ref_spec is not None:
            if op.ref_domain is None:
                raise click.UsageError(f"{group} {operation} does not take --ref")
            positional.insert(0, parse_ref(op.ref_domain, ref_spec))
        kwargs = dict(parse_option(opt) for opt in opts)
        try:
            inspect.signature(op.func).bind(*positional, **kwargs)
        except TypeError as exc:
            raise click.UsageError(f"{group} {operation}: {exc}") from None
        envelope = op.func(*positional, **kwargs)
    except (PsplayError, ValidationError) as exc:
        log.debug("build_failed", group=group, operation=operation, error=type(exc).__name__)
        raise click.ClickException(str(exc)) from exc
    log.debug("built", group=group, operation=operation, verb=envelope.verb)
    app.emit(envelope, compact=compact)
