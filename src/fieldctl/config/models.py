"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fieldctl.toml only contains
overrides. A project with no config file gets the built-in field types
and the default storage key layout.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from fieldctl.domain.types import ValueType

# --- fieldctl.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    key_prefix: str = "_"
    separator: str = Field(default="|", min_length=1)
    keepalive_property: str = Field(default="_empty", min_length=1)

    @model_validator(mode="after")
    def _check_keepalive_property(self) -> StorageConfig:
        if self.keepalive_property.isdigit():
            msg = "keepalive_property must not be a record index"
            raise ValueError(msg)
        if self.separator in self.keepalive_property:
            msg = "keepalive_property must not contain the separator"
            raise ValueError(msg)
        return self


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".fieldctl/plugins"


class FieldTypeConfig(BaseModel):
    """[fields.<name>] section."""

    model_config = {"frozen": True}

    value_type: ValueType = ValueType.SINGLE_VALUE
    properties: dict[str, Any] = Field(default_factory=dict)
    description: str = ""

