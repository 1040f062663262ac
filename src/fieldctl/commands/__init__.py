"""Subcommand modules for fieldctl.

Provides register_commands() which uses deferred imports to keep
``fieldctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from fieldctl.commands.fields import fields

    cli.add_command(fields)

    # --- Standalone commands ---
    from fieldctl.commands.flatten import flatten, unflatten
    from fieldctl.commands.normalize import normalize

    cli.add_command(normalize)
    cli.add_command(flatten)
    cli.add_command(unflatten)
