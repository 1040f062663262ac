"""Value type enum.

A value type decides how a field's record list is projected to and from
the shape its consumers expect.
"""

from __future__ import annotations

from enum import StrEnum


class ValueType(StrEnum):
    """Projection strategies for a value set."""

    SINGLE_VALUE = "single_value"
    MULTIPLE_VALUES = "multiple_values"
    MULTIPLE_PROPERTIES = "multiple_properties"
    VALUE_SET = "value_set"
