"""Shared schema options and input decoding for value commands."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

import click

from fieldctl.domain.types import ValueType

VALUE_TYPE_CHOICES = [vt.value for vt in ValueType]


def _parse_properties(
    _ctx: click.Context,
    _param: click.Parameter,
    value: tuple[str, ...],
) -> dict[str, str]:
    """Turn repeated ``NAME=DEFAULT`` options into an ordered mapping."""
    properties: dict[str, str] = {}
    for item in value:
        name, _, default = item.partition("=")
        name = name.strip()
        if not name:
            raise click.BadParameter(f"Property {item!r} has no name", param_hint="--property")
        properties[name] = default
    return properties


def schema_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--field``, ``--type`` and ``--property`` to a command."""
    func = click.option(
        "-p",
        "--property",
        "properties",
        multiple=True,
        metavar="NAME=DEFAULT",
        callback=_parse_properties,
        help="Extra record property with its default (repeatable).",
    )(func)
    func = click.option(
        "-t",
        "--type",
        "value_type",
        type=click.Choice(VALUE_TYPE_CHOICES),
        default=None,
        help="Value type (required unless --field is given).",
    )(func)
    func = click.option(
        "-f",
        "--field",
        "field_type",
        default=None,
        help="Registered field type supplying the schema.",
    )(func)
    return func


def read_input(source: str, *, raw: bool = False, param_hint: str = "INPUT") -> Any:
    """Decode *source* as JSON, reading stdin when it is ``-``.

    With *raw*, the text is returned as a plain string scalar.
    """
    text = sys.stdin.read() if source == "-" else source
    if raw:
        return text.rstrip("\n")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc}", param_hint=param_hint) from exc
