"""Click command class carrying usage examples.

``--help`` stays short; ``--examples`` prints annotated command lines
and exits before any argument is validated, so it works even when
required arguments are missing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

# (what it does, command line)
type Example = tuple[str, str]


def format_examples(examples: Sequence[Example]) -> str:
    """Render examples as commented shell lines."""
    blocks = [f"  # {summary}\n  {line}" for summary, line in examples]
    return "\n\n".join(blocks)


class PsplayCommand(click.Command):
    """Command that accepts ``examples=[(summary, line), ...]``."""

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(format_examples(self.examples))
        ctx.exit(0)
