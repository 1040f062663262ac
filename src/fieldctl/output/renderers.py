"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fieldctl.output.console import create_console, get_output, style_for_value_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from fieldctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Values print bare (strings as-is, everything else as compact JSON),
    storage entries print as ``key=value`` lines, and registry listings
    print names only.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op in ("normalize", "unflatten"):
        return _bare(result.data.get("value"))
    if result.op == "flatten":
        entries = result.data.get("entries", {})
        return "\n".join(f"{key}={value}" for key, value in entries.items())
    if result.op == "list_field_types":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "show_field_type":
        return str(result.data.get("name", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _bare(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return _compact(value)


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="fc.ok")
    op = Text(f"  {result.op}", style="fc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    text = _compact(value) if isinstance(value, (dict, list)) else str(value)
    console.print(Text.assemble((f"  {key}: ", "fc.key"), (text, style)))


def _records_table(records: list[dict[str, Any]], properties: list[str]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    for prop in properties:
        table.add_column(prop)
    for index, record in enumerate(records):
        table.add_row(str(index), *(Text(_bare(record.get(prop))) for prop in properties))
    return table


# ── Operation renderers ───────────────────────────────────────────────


def _render_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render normalize / unflatten results: projection plus record table."""
    data = result.data
    value_type = str(data.get("value_type", ""))

    _status_line(console, result)
    if data.get("name"):
        _field(console, "name", data["name"], style="fc.name")
    if data.get("field_type"):
        _field(console, "field_type", data["field_type"])
    _field(console, "value_type", value_type, style=style_for_value_type(value_type))

    records = data.get("records")
    if records is None:
        _field(console, "value", "(unset)", style="fc.empty")
        return

    _field(console, "value", _compact(data.get("value")))
    if verbose:
        _field(console, "keepalive", data.get("keepalive"))

    if not records:
        _field(console, "records", "(empty)", style="fc.empty")
        return

    console.print()
    console.print(_records_table(records, list(data.get("properties") or records[0])))


def _render_flatten(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "name", data.get("name", ""), style="fc.name")
    value_type = str(data.get("value_type", ""))
    _field(console, "value_type", value_type, style=style_for_value_type(value_type))

    entries: dict[str, str] = data.get("entries", {})
    if not entries:
        _field(console, "entries", "(none)", style="fc.empty")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Key")
    table.add_column("Value")
    for key, value in entries.items():
        table.add_row(Text(key), Text(value))
    console.print()
    console.print(table)


def _render_field_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(title=f"Field types ({len(items)})", show_header=True, header_style="bold")
    table.add_column("Name", style="fc.name")
    table.add_column("Value type")
    table.add_column("Properties")
    if verbose:
        table.add_column("Description")

    for item in items:
        value_type = item["value_type"]
        row = [
            Text(item["name"]),
            Text(value_type, style=style_for_value_type(value_type)),
            Text(", ".join(item["properties"])),
        ]
        if verbose:
            row.append(Text(item.get("description", "")))
        table.add_row(*row)

    console.print(table)


def _render_field_type(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "name", data.get("name", ""), style="fc.name")
    value_type = str(data.get("value_type", ""))
    _field(console, "value_type", value_type, style=style_for_value_type(value_type))
    _field(console, "properties", data.get("properties", {}))
    _field(console, "keepalive", data.get("keepalive"))
    if data.get("description"):
        _field(console, "description", data["description"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    label = Text("ERROR", style="fc.error")
    op = Text(f"  {result.op}", style="fc.op")
    console.print(label, op, Text(f" — {msg}"), end="")
    console.print()
    if result.error is None:
        return
    if verbose:
        _field(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "normalize": _render_value,
    "unflatten": _render_value,
    "flatten": _render_flatten,
    "list_field_types": _render_field_types,
    "show_field_type": _render_field_type,
}
