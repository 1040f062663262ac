"""ValueSet — canonical record storage for a field's value.

Raw value set schema::

    [
        {"value": "", <property2>: "", ...},
        ...
    ]

``set()`` accepts a single value, a list of values, a single mapping of
properties, or a list of such mappings, and normalizes all of them into
the schema above. ``get()`` projects the records back out according to the
value type.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from fieldctl.domain.errors import InvalidArgument
from fieldctl.domain.types import ValueType

VALUE_PROPERTY = "value"

_POSITIONAL_KEY_RE = re.compile(r"0|-?[1-9][0-9]*")

Record = dict[str, Any]


def coerce_value_type(value_type: ValueType | str) -> ValueType:
    """Return the :class:`ValueType` for *value_type* or raise InvalidArgument."""
    if isinstance(value_type, ValueType):
        return value_type
    if not isinstance(value_type, str):
        msg = f"Invalid type specified for value set: {value_type!r}"
        raise InvalidArgument(msg)
    try:
        return ValueType(value_type)
    except ValueError as exc:
        msg = f"Invalid type specified for value set: {value_type!r}"
        raise InvalidArgument(msg) from exc


def _is_container(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _is_positional_key(key: object) -> bool:
    """Integer keys and canonical integer strings ("0", "12", "-3") count as positions."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and _POSITIONAL_KEY_RE.fullmatch(key) is not None


def _members(raw: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> list[Any]:
    if isinstance(raw, Mapping):
        return list(raw.values())
    return list(raw)


class ValueSet:
    """A typed collection of records sharing one property schema.

    The value type and property schema are fixed at construction. Records
    are replaced wholesale by :meth:`set` and are ``None`` until first set.
    """

    def __init__(
        self,
        value_type: ValueType | str,
        additional_properties: Mapping[str, Any] | None = None,
    ) -> None:
        self._type = coerce_value_type(value_type)
        properties: dict[str, Any] = {VALUE_PROPERTY: ""}
        properties.update(additional_properties or {})
        self._properties = MappingProxyType(properties)
        self._records: list[Record] | None = None

    def __repr__(self) -> str:
        return f"ValueSet({self._type.value!r}, records={self._records!r})"

    @property
    def value_type(self) -> ValueType:
        return self._type

    @property
    def properties(self) -> Mapping[str, Any]:
        """Property names mapped to the default used when a record lacks them."""
        return self._properties

    def requires_keepalive_key(self) -> bool:
        """Whether storage needs a sentinel to tell "emptied" from "absent"."""
        return self._type is not ValueType.SINGLE_VALUE

    def is_empty(self) -> bool:
        return not self._records

    def get(self) -> Any:
        """Return the records projected according to the value type."""
        if self._records is None:
            return None

        match self._type:
            case ValueType.MULTIPLE_VALUES:
                return [record[VALUE_PROPERTY] for record in self._records]
            case ValueType.MULTIPLE_PROPERTIES:
                return dict(self._records[0]) if self._records else {}
            case ValueType.VALUE_SET:
                return self.get_records()
            case _:
                return self._records[0][VALUE_PROPERTY] if self._records else ""

    def get_records(self) -> list[Record] | None:
        """Return the full normalized records regardless of value type."""
        if self._records is None:
            return None
        return [dict(record) for record in self._records]

    def set(self, raw_value_set: Any) -> None:
        """Normalize *raw_value_set* and replace the stored records."""
        if raw_value_set is None:
            self._records = None
            return

        if not _is_container(raw_value_set):
            raw_value_set = [raw_value_set]

        if self._is_flat(raw_value_set):
            raw_records = self._flat_to_raw_records(raw_value_set)
        else:
            raw_records = _members(raw_value_set)

        self._records = [self._format_record(raw) for raw in raw_records]

    # ------------------------------------------------------------------
    # Normalization helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _is_flat(raw: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> bool:
        return not any(_is_container(member) for member in _members(raw))

    @staticmethod
    def _flat_to_raw_records(
        raw: Mapping[Any, Any] | list[Any] | tuple[Any, ...],
    ) -> list[Any]:
        if isinstance(raw, Mapping) and not all(_is_positional_key(k) for k in raw):
            return [raw]
        return [{VALUE_PROPERTY: member} for member in _members(raw)]

    def _format_record(self, raw: Any) -> Record:
        """Coerce *raw* to exactly the registered properties, filling defaults."""
        source: Mapping[Any, Any] = raw if isinstance(raw, Mapping) else {}
        record: Record = {}
        for prop, default in self._properties.items():
            value = source.get(prop)
            record[prop] = default if value is None else value
        return record
