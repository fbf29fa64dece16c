"""Root CLI group for psplay with global flags and command registration."""

from __future__ import annotations

import click

from psplay import __version__
from psplay.commands import register_commands
from psplay.commands._context import AppContext
from psplay.config.settings import PsplaySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="psplay")
@click.option("-v", "--verbose", is_flag=True, default=None, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, default=None, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool | None,
    log_json: bool | None,
    config_path: str | None,
) -> None:
    """psplay — build Photoshop action descriptors and print them as JSON."""
    settings = PsplaySettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
