"""Root CLI group for fieldctl with global flags and command registration."""

from __future__ import annotations

import click

from fieldctl import __version__
from fieldctl.commands import register_commands
from fieldctl.commands._base import FieldctlGroup
from fieldctl.commands._context import AppContext
from fieldctl.config.settings import FieldctlSettings


@click.group(
    cls=FieldctlGroup,
    invoke_without_command=True,
    examples="""\
  fieldctl fields list
  fieldctl normalize '["a", "b"]' --field set
  fieldctl --json flatten toppings '["ham"]' --field set
  fieldctl -c ./fieldctl.toml fields show gallery""",
)
@click.version_option(version=__version__, prog_name="fieldctl")
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
    """fieldctl — custom field value normalization utility."""
    ctx.ensure_object(dict)
    settings = FieldctlSettings.from_cli(
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
