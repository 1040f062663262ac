"""ValueService — normalize, flatten, and unflatten field values.

The schema for an operation comes either from a registered field type
(``field_type="set"``) or from an explicit value type plus optional extra
properties. Explicit properties are merged over the field type's own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fieldctl.domain.errors import InvalidArgument, UnsupportedValue
from fieldctl.domain.fields import get_field_type
from fieldctl.domain.storage_keys import flatten, unflatten
from fieldctl.domain.types import ValueType
from fieldctl.domain.value_set import ValueSet
from fieldctl.services.base import BaseService
from fieldctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class _SchemaError(Exception):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ValueService(BaseService):
    """Value set operations driven by a field type or explicit schema."""

    def normalize(
        self,
        raw: Any,
        *,
        field_type: str | None = None,
        value_type: ValueType | str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Normalize *raw* and return both its projection and its records."""
        op = "normalize"
        try:
            value_set = self._value_set(field_type, value_type, properties)
        except _SchemaError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        value_set.set(raw)
        logger.debug("Normalized %s input into %s", value_set.value_type, value_set)
        return ServiceResult(
            ok=True,
            op=op,
            data=self._describe(value_set, field_type),
        )

    def flatten(
        self,
        name: str,
        raw: Any,
        *,
        field_type: str | None = None,
        value_type: ValueType | str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Normalize *raw* and return the storage entries for field *name*."""
        op = "flatten"
        try:
            value_set = self._value_set(field_type, value_type, properties)
        except _SchemaError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        value_set.set(raw)
        try:
            entries = flatten(name, value_set, self.key_format)
        except UnsupportedValue as exc:
            return ServiceResult.failure(op, "UNSUPPORTED_VALUE", str(exc), name=name)
        except InvalidArgument as exc:
            return ServiceResult.failure(op, "INVALID_FIELD_NAME", str(exc), name=name)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "value_type": value_set.value_type.value,
                "entries": entries,
                "count": len(entries),
            },
        )

    def unflatten(
        self,
        name: str,
        entries: Mapping[str, Any],
        *,
        field_type: str | None = None,
        value_type: ValueType | str | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Rebuild field *name*'s value set from flat storage *entries*."""
        op = "unflatten"
        try:
            value_set = self._value_set(field_type, value_type, properties)
        except _SchemaError as exc:
            return ServiceResult.failure(op, exc.code, exc.message)

        try:
            unflatten(name, entries, value_set, self.key_format)
        except InvalidArgument as exc:
            return ServiceResult.failure(op, "INVALID_FIELD_NAME", str(exc), name=name)

        data = {"name": name, **self._describe(value_set, field_type)}
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _value_set(
        field_type: str | None,
        value_type: ValueType | str | None,
        properties: Mapping[str, Any] | None,
    ) -> ValueSet:
        merged: dict[str, Any] = {}
        if field_type is not None:
            try:
                definition = get_field_type(field_type)
            except KeyError as exc:
                raise _SchemaError("UNKNOWN_FIELD_TYPE", exc.args[0]) from exc
            merged.update(definition.properties)
            if value_type is None:
                value_type = definition.value_type
        elif value_type is None:
            raise _SchemaError(
                "MISSING_SCHEMA",
                "Either a field type or a value type is required",
            )

        merged.update(properties or {})
        try:
            return ValueSet(value_type, merged)
        except InvalidArgument as exc:
            raise _SchemaError("INVALID_VALUE_TYPE", str(exc)) from exc

    @staticmethod
    def _describe(value_set: ValueSet, field_type: str | None) -> dict[str, Any]:
        return {
            "field_type": field_type,
            "value_type": value_set.value_type.value,
            "properties": dict(value_set.properties),
            "value": value_set.get(),
            "records": value_set.get_records(),
            "empty": value_set.is_empty(),
            "keepalive": value_set.requires_keepalive_key(),
        }
