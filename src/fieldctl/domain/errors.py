"""Domain exceptions."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a value set or storage key receives an unusable argument."""


class UnsupportedValue(InvalidArgument):
    """Raised when a property value cannot be written as a flat storage string."""
