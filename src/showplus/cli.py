"""Root CLI group for showplus with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from showplus import __version__
from showplus.commands import register_commands
from showplus.commands._context import AppContext
from showplus.config.settings import ShowSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="showplus")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """showplus — preview value renderings from the command line."""
    try:
        settings = ShowSettings.from_cli(
            config_path=config_path,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc.error_count()} error(s)\n{exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
