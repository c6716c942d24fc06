"""Root CLI group for sortgraph with global flags and command registration."""

from __future__ import annotations

import click
import structlog

from sortgraph import __version__
from sortgraph.commands import register_commands
from sortgraph.commands._base import SortGraphGroup
from sortgraph.commands._context import AppContext
from sortgraph.config.settings import SortGraphSettings


@click.group(cls=SortGraphGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="sortgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """sortgraph — sorted-array graph toolkit."""
    settings = SortGraphSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
