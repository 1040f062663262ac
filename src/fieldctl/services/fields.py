"""FieldService — inspect and extend the field type registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from fieldctl.domain.fields import FieldType, get_field_type, list_field_types, register_field_type
from fieldctl.services.base import BaseService
from fieldctl.services.result import ServiceResult

if TYPE_CHECKING:
    from fieldctl.config.settings import FieldctlSettings

logger = logging.getLogger(__name__)


def register_configured_field_types(settings: FieldctlSettings) -> list[str]:
    """Register the ``[fields.<name>]`` sections of *settings*.

    Returns warnings for sections that could not be registered; a bad
    section never prevents the others from loading.
    """
    warnings: list[str] = []
    for name, section in settings.fields.items():
        try:
            register_field_type(
                FieldType(
                    name=name,
                    value_type=section.value_type,
                    properties=section.properties,
                    description=section.description,
                )
            )
        except (ValidationError, ValueError) as exc:
            logger.warning("Skipping configured field type %r: %s", name, exc)
            warnings.append(f"Skipped field type {name!r}: {exc}")
    return warnings


def _field_type_payload(field_type: FieldType) -> dict[str, Any]:
    value_set = field_type.create_value_set()
    return {
        "name": field_type.name,
        "value_type": field_type.value_type.value,
        "properties": dict(value_set.properties),
        "keepalive": value_set.requires_keepalive_key(),
        "description": field_type.description,
    }


class FieldService(BaseService):
    """Read-only views over the field type registry."""

    def list_types(self) -> ServiceResult:
        items = [_field_type_payload(ft) for ft in list_field_types()]
        return ServiceResult(
            ok=True,
            op="list_field_types",
            data={"items": items, "count": len(items)},
        )

    def show_type(self, name: str) -> ServiceResult:
        op = "show_field_type"
        try:
            field_type = get_field_type(name)
        except KeyError:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"No field type registered with name: {name}",
                name=name,
            )
        return ServiceResult(ok=True, op=op, data=_field_type_payload(field_type))
