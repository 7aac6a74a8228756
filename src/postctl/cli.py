"""Root CLI group for postctl with global flags and command registration."""

from __future__ import annotations

import click

from postctl import __version__
from postctl.commands import register_commands
from postctl.commands._context import AppContext
from postctl.config.logging import bind_command
from postctl.config.settings import PostctlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="postctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """postctl — lint, scaffold, and index front-matter blog posts."""
    settings = PostctlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    bind_command(ctx.invoked_subcommand, site_root=settings.site_root)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
