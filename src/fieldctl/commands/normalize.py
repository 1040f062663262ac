"""Command: normalize a raw field value into records."""

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
  fieldctl normalize '"red"' --field color
  fieldctl normalize '["a", "b"]' --type multiple_values
  echo '{"value": "v1", "label": "L1"}' | fieldctl normalize --type multiple_properties -p label=
  fieldctl normalize 'plain text' --raw --field text
  fieldctl --json normalize '[{"value": "a"}]' --type value_set -p extra=x""",
)
@click.argument("source", metavar="INPUT", default="-")
@schema_options
@click.option("--raw", is_flag=True, help="Treat INPUT as a plain string, not JSON.")
@click.pass_obj
def normalize(
    app: AppContext,
    source: str,
    field_type: str | None,
    value_type: str | None,
    properties: dict[str, str],
    raw: bool,
) -> None:
    """Normalize INPUT (JSON, or '-' for stdin) and show value and records."""
    data = read_input(source, raw=raw)
    app.emit(
        app.value_service.normalize(
            data,
            field_type=field_type,
            value_type=value_type,
            properties=properties,
        )
    )
