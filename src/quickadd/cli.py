"""Root CLI group for quickadd with global flags and command registration."""

from __future__ import annotations

import click

from quickadd import __version__
from quickadd.commands import register_commands
from quickadd.commands._base import QuickGroup
from quickadd.commands._context import AppContext
from quickadd.config.settings import QuickAddSettings


@click.group(
    cls=QuickGroup,
    invoke_without_command=True,
    examples="""\
  quickadd vaults
  quickadd add "Buy milk" --due 2024-01-18
  quickadd add Call the dentist tomorrow --vault Work
  quickadd today""",
)
@click.version_option(version=__version__, prog_name="quickadd")
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
    """quickadd — add tasks to today's Obsidian daily note."""
    settings = QuickAddSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    if ctx.obj is None:
        ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
