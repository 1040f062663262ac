"""Flat key/value storage codec for value sets.

Backing stores such as post meta tables hold one string per key, so a
value set is flattened before it is written:

- single value fields:   ``_name``                -> value
- everything else:       ``_name|<index>|<prop>`` -> property value
                         ``_name|_empty``         -> "" (keepalive)

The keepalive entry is written whenever a multi-record value set is set,
including when it holds no records, so an emptied field is not mistaken
for a field that was never saved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fieldctl.domain.errors import InvalidArgument, UnsupportedValue
from fieldctl.domain.types import ValueType
from fieldctl.domain.value_set import ValueSet


@dataclass(frozen=True)
class KeyFormat:
    """Storage key layout."""

    prefix: str = "_"
    separator: str = "|"
    keepalive_property: str = "_empty"

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "Key separator must not be empty"
            raise InvalidArgument(msg)

    def root_key(self, name: str) -> str:
        self._check_name(name)
        return f"{self.prefix}{name}"

    def record_key(self, name: str, index: int, prop: str) -> str:
        return f"{self.root_key(name)}{self.separator}{index}{self.separator}{prop}"

    def keepalive_key(self, name: str) -> str:
        return f"{self.root_key(name)}{self.separator}{self.keepalive_property}"

    def _check_name(self, name: str) -> None:
        if not name:
            msg = "Field name must not be empty"
            raise InvalidArgument(msg)
        if self.separator in name:
            msg = f"Field name {name!r} must not contain {self.separator!r}"
            raise InvalidArgument(msg)


DEFAULT_KEY_FORMAT = KeyFormat()


def flatten(
    name: str,
    value_set: ValueSet,
    key_format: KeyFormat = DEFAULT_KEY_FORMAT,
) -> dict[str, str]:
    """Return the storage entries representing *value_set* under *name*.

    Raises:
        InvalidArgument: If *name* is empty or contains the separator.
        UnsupportedValue: If a record holds a mapping or list.
    """
    records = value_set.get_records()
    if records is None:
        key_format.root_key(name)
        return {}

    if value_set.value_type is ValueType.SINGLE_VALUE:
        return {key_format.root_key(name): _to_storage(value_set.get())}

    entries = {key_format.keepalive_key(name): ""}
    for index, record in enumerate(records):
        for prop, value in record.items():
            entries[key_format.record_key(name, index, prop)] = _to_storage(value)
    return entries


def unflatten(
    name: str,
    entries: Mapping[str, Any],
    value_set: ValueSet,
    key_format: KeyFormat = DEFAULT_KEY_FORMAT,
) -> ValueSet:
    """Load the entries stored under *name* into *value_set* and return it.

    Entries belonging to other fields are ignored.
    """
    root = key_format.root_key(name)

    if value_set.value_type is ValueType.SINGLE_VALUE:
        value_set.set(entries.get(root))
        return value_set

    grouped: dict[int, dict[str, Any]] = {}
    record_prefix = f"{root}{key_format.separator}"
    for key, value in entries.items():
        if not key.startswith(record_prefix):
            continue
        index_part, sep, prop = key[len(record_prefix) :].partition(key_format.separator)
        if not sep or not index_part.isdigit() or not prop:
            continue
        grouped.setdefault(int(index_part), {})[prop] = value

    if grouped:
        value_set.set([grouped[index] for index in sorted(grouped)])
    elif key_format.keepalive_key(name) in entries:
        value_set.set([])
    else:
        value_set.set(None)
    return value_set


def _to_storage(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        msg = f"Cannot store nested value {value!r}; storage entries hold scalars only"
        raise UnsupportedValue(msg)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)

