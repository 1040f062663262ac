"""Rich Console factory and theme for fieldctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FIELDCTL_THEME = Theme(
    {
        "fc.ok": "bold green",
        "fc.error": "bold red",
        "fc.warning": "bold yellow",
        "fc.op": "bold cyan",
        "fc.key": "dim",
        "fc.name": "bold blue",
        "fc.empty": "dim italic",
        "fc.type.single_value": "green",
        "fc.type.multiple_values": "blue",
        "fc.type.multiple_properties": "yellow",
        "fc.type.value_set": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FIELDCTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


_VALUE_TYPES = frozenset({"single_value", "multiple_values", "multiple_properties", "value_set"})


def style_for_value_type(value_type: str) -> str:
    """Return the Rich style name for a value type."""
    return f"fc.type.{value_type}" if value_type in _VALUE_TYPES else ""
