"""Root CLI group for assetpub with global flags and command registration."""

from __future__ import annotations

import click

from assetpub import __version__
from assetpub.commands import register_commands
from assetpub.commands._context import AppContext
from assetpub.config.settings import AssetPubSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="assetpub")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (just the URL).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error detail.")
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
    """assetpub — publish static asset directories and print their URLs."""
    settings = AssetPubSettings.load(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
