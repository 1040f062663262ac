"""BaseService — abstract foundation for all fieldctl services.

Every service receives the resolved :class:`FieldctlSettings` at
construction time and reads storage layout and project-level field
types from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldctl.domain.storage_keys import KeyFormat

if TYPE_CHECKING:
    from fieldctl.config.settings import FieldctlSettings


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ValueService(BaseService):
            def normalize(self, raw, ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: FieldctlSettings) -> None:
        self._settings = settings

    @property
    def key_format(self) -> KeyFormat:
        """Storage key layout from the ``[storage]`` config section."""
        storage = self._settings.storage
        return KeyFormat(
            prefix=storage.key_prefix,
            separator=storage.separator,
            keepalive_property=storage.keepalive_property,
        )
