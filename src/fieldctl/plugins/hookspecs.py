"""Pluggy hook specifications for fieldctl setup extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from fieldctl.domain.fields import FieldType

PROJECT_NAME = "fieldctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class FieldctlHookSpec:
    """Hook specifications for the fieldctl plugin system."""

    @hookspec
    def register_field_types(self) -> list[FieldType] | None:
        """Return field type definitions to extend FIELD_REGISTRY."""
