#!/usr/bin/env python3
"""
Config Store

Key/value user settings persisted as config.json. The document is loaded once
when the store is constructed and held in memory for the rest of the
invocation; every mutation rewrites the whole file.
"""

import logging
from pathlib import Path
from typing import Any

from ..core.datastore_mixin import JsonDocumentStore
from .registry import DEFAULT_FORMAT, get_setting_default

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


class ConfigStore(JsonDocumentStore):
    """
    Store for user settings.

    Performs no validation: callers check values against the setting registry
    before calling ``set``. Unrecognised keys are kept as-is.

    A missing or corrupted file yields ``{"format": "json"}``; corruption is
    reported through ``had_load_error`` rather than an exception.
    """

    file_name = CONFIG_FILE_NAME

    def __init__(self, config_dir: str | Path, file_name: str | None = None):
        super().__init__(config_dir, file_name)
        self._config: dict[str, Any] = self._load_document()

    def _default_document(self) -> dict[str, Any]:
        return {"format": DEFAULT_FORMAT}

    def get(self, key: str) -> Any:
        """Stored value for a key, or None if unset (caller applies the default)."""
        return self._copy(self._config.get(key))

    def has(self, key: str) -> bool:
        """Check whether a key has an explicit value."""
        return key in self._config

    def get_or_default(self, key: str) -> Any:
        """Stored value for a key, falling back to the registry default."""
        if key in self._config:
            return self.get(key)
        return get_setting_default(key)

    def set(self, key: str, value: Any) -> None:
        """
        Set a value and persist the document.

        The in-memory value is updated even if the write fails.

        Raises:
            StoreWriteError: If config.json cannot be written
        """
        self._config[key] = self._copy(value)
        self._save_document(self._config)
        logger.info("Setting '%s' updated", key)

    def reset(self, key: str) -> None:
        """
        Remove a key so that ``get`` falls back to the default, and persist.

        Raises:
            StoreWriteError: If config.json cannot be written
        """
        self._config.pop(key, None)
        self._save_document(self._config)
        logger.info("Setting '%s' reset", key)

    def get_all(self) -> dict[str, Any]:
        """Defensive copy of the whole document."""
        return self._copy(self._config)

    def summary_text(self) -> str:
        count = len(self._config)
        suffix = " (recovered from corrupted file)" if self.had_load_error else ""
        return f"Settings: {count} value{'' if count == 1 else 's'} set{suffix}"
