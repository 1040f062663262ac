"""Field type definitions and registry.

Each field type names the value type its input produces and any extra
properties stored alongside ``value``. Built-in types are registered at
import; projects add their own via ``[fields.<name>]`` config sections
and plugins add theirs through the ``register_field_types`` hook.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from fieldctl.domain.types import ValueType
from fieldctl.domain.value_set import ValueSet


class FieldType(BaseModel):
    """A named field type and the schema of the values it produces."""

    model_config = {"frozen": True}

    name: str
    value_type: ValueType = ValueType.SINGLE_VALUE
    properties: dict[str, Any] = Field(default_factory=dict)
    description: str = ""

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()

    def create_value_set(self) -> ValueSet:
        """Return an empty value set using this field type's schema."""
        return ValueSet(self.value_type, self.properties)


FIELD_REGISTRY: dict[str, FieldType] = {}


def _builtin_field_types() -> dict[str, FieldType]:
    single = ValueType.SINGLE_VALUE
    return {
        "checkbox": FieldType(name="checkbox", value_type=single, description="Boolean toggle"),
        "color": FieldType(name="color", value_type=single, description="Hex color picker"),
        "html": FieldType(name="html", value_type=single, description="Static HTML block"),
        "radio": FieldType(name="radio", value_type=single, description="Single choice"),
        "radio_image": FieldType(
            name="radio_image",
            value_type=single,
            description="Single choice rendered as images",
        ),
        "select": FieldType(name="select", value_type=single, description="Dropdown choice"),
        "set": FieldType(
            name="set",
            value_type=ValueType.MULTIPLE_VALUES,
            description="Multiple choice checkboxes",
        ),
        "text": FieldType(name="text", value_type=single, description="Single-line text"),
    }


BUILTIN_FIELD_TYPE_NAMES = frozenset(_builtin_field_types())


def get_field_type(name: str) -> FieldType:
    """Look up a registered field type.

    Raises:
        KeyError: If no field type is registered under *name*.
    """
    try:
        return FIELD_REGISTRY[name]
    except KeyError:
        msg = f"No field type registered for name={name!r}"
        raise KeyError(msg) from None


def list_field_types() -> list[FieldType]:
    """Return all registered field types sorted by name."""
    return [FIELD_REGISTRY[name] for name in sorted(FIELD_REGISTRY)]


def register_field_type(field_type: FieldType) -> None:
    """Register a custom field type.

    Built-in names are reserved. Registering an identical definition twice
    is a no-op; a different definition under a taken name is rejected.
    """
    if not isinstance(field_type, FieldType):
        msg = f"Field type registrations must be FieldType, got {type(field_type).__name__}"
        raise TypeError(msg)

    if not field_type.name:
        msg = "Field type name must not be empty"
        raise ValueError(msg)

    if field_type.name in BUILTIN_FIELD_TYPE_NAMES:
        msg = f"Field type {field_type.name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    existing = FIELD_REGISTRY.get(field_type.name)
    if existing is not None and existing != field_type:
        msg = f"Field type {field_type.name!r} is already registered"
        raise ValueError(msg)

    FIELD_REGISTRY[field_type.name] = field_type


def _register_builtins() -> None:
    """Populate :data:`FIELD_REGISTRY` with built-in field types."""
    FIELD_REGISTRY.update(_builtin_field_types())


_register_builtins()
