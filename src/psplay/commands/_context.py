"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and centralizes output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from psplay.config.logging import configure_logging
from psplay.output.formatters import format_command

if TYPE_CHECKING:
    from psplay.config.settings import PsplaySettings
    from psplay.domain.command import CommandEnvelope


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PsplaySettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, envelope: CommandEnvelope, *, compact: bool = False) -> None:
        """Print a built command to stdout."""
        click.echo(format_command(envelope, output=self.settings.output, compact=compact))
