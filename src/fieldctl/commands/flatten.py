"""Commands: convert field values to and from flat storage entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldctl.commands._base import FieldctlCommand
from fieldctl.commands._input import read_input, schema_options

if TYPE_CHECKING:
    from fieldctl.commands._context import AppContext


@click.command(
    cls=FieldctlCommand,
    examples="""\
  fieldctl flatten color '"#ff0000"' --field color
  fieldctl flatten toppings '["cheese", "ham"]' --field set
  fieldctl flatten slides '[{"value": "a", "caption": "A"}]' --type value_set -p caption=""",
)
@click.argument("name")
@click.argument("source", metavar="INPUT", default="-")
@schema_options
@click.option("--raw", is_flag=True, help="Treat INPUT as a plain string, not JSON.")
@click.pass_obj
def flatten(
    app: AppContext,
    name: str,
    source: str,
    field_type: str | None,
    value_type: str | None,
    properties: dict[str, str],
    raw: bool,
) -> None:
    """Show the storage entries for field NAME holding INPUT."""
    data = read_input(source, raw=raw)
    app.emit(
        app.value_service.flatten(
            name,
            data,
            field_type=field_type,
            value_type=value_type,
            properties=properties,
        )
    )


@click.command(
    cls=FieldctlCommand,
    examples="""\
  fieldctl unflatten toppings '{"_toppings|_empty": "", "_toppings|0|value": "ham"}' --field set
  fieldctl --json flatten t '["a"]' --field set | jq .data.entries | fieldctl unflatten t --field set""",
)
@click.argument("name")
@click.argument("source", metavar="ENTRIES", default="-")
@schema_options
@click.pass_obj
def unflatten(
    app: AppContext,
    name: str,
    source: str,
    field_type: str | None,
    value_type: str | None,
    properties: dict[str, str],
) -> None:
    """Rebuild field NAME from a JSON object of storage ENTRIES."""
    entries = read_input(source, param_hint="ENTRIES")
    if not isinstance(entries, dict):
        raise click.BadParameter("Storage entries must be a JSON object", param_hint="ENTRIES")
    app.emit(
        app.value_service.unflatten(
            name,
            entries,
            field_type=field_type,
            value_type=value_type,
            properties=properties,
        )
    )
