"""Command group: inspect registered field types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fieldctl.commands._base import FieldctlGroup

if TYPE_CHECKING:
    from fieldctl.commands._context import AppContext


@click.group(
    cls=FieldctlGroup,
    examples="""\
  fieldctl fields list
  fieldctl -v fields list
  fieldctl fields show set
  fieldctl --json fields show radio_image""",
)
def fields() -> None:
    """Inspect registered field types."""


@fields.command(
    "list",
    examples="""\
  fieldctl fields list
  fieldctl -q fields list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List built-in, configured, and plugin field types."""
    app.emit(app.field_service.list_types())


@fields.command(
    examples="""\
  fieldctl fields show text
  fieldctl --json fields show set""",
)
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show the schema of field type NAME."""
    app.emit(app.field_service.show_type(name))
