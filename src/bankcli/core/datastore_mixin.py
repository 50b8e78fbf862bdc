#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for the JSON document stores.

Each store owns exactly one JSON document in the config directory and follows
the same discipline:

- ensure the directory exists before every read and write
- load the whole document; on a missing file start from the default document
- on an unreadable or malformed file, log a warning, record a load error and
  start from the default document (never raise)
- write the whole document atomically; write failures surface as
  ``StoreWriteError`` unless the subclass chooses to swallow them

Stores do not lock their files. Two invocations doing read-modify-write on the
same document race and the last writer wins; atomic replacement only
guarantees that each write is seen whole.
"""

import copy
import logging
from pathlib import Path
from typing import Any

from .errors import StoreWriteError
from .json_utils import ensure_directory, read_json, write_json

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """
    Base class providing document load/save and file metadata.

    Subclasses set ``file_name`` and may override:
    - _default_document() -> initial document when the file is absent or corrupt
    - _check_document(document) -> raise ValueError if the parsed JSON has the wrong shape
    - summary_text() -> str (required)
    """

    file_name: str = ""

    def __init__(self, config_dir: str | Path, file_name: str | None = None):
        """
        Initialize store state.

        Args:
            config_dir: Directory holding the store file
            file_name: Override the default file name
        """
        self.config_dir = Path(config_dir)
        self.path = self.config_dir / (file_name or self.file_name)
        self._load_error: str | None = None

    def _default_document(self) -> Any:
        return {}

    def _check_document(self, document: Any) -> None:
        if not isinstance(document, dict):
            raise ValueError(f"expected a JSON object, got {type(document).__name__}")

    def _load_document(self) -> Any:
        """Read the document, recovering to the default on any failure."""
        self._load_error = None
        try:
            ensure_directory(self.config_dir)
            if not self.path.exists():
                return self._default_document()
            document = read_json(self.path)
            self._check_document(document)
        except (OSError, ValueError) as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            self._load_error = f"Could not read {self.path.name}: {e}"
            logger.warning("%s; using defaults", self._load_error)
            return self._default_document()

        return document

    def _save_document(self, document: Any) -> None:
        """
        Write the whole document atomically.

        Raises:
            StoreWriteError: If the directory or file cannot be written
        """
        try:
            ensure_directory(self.config_dir)
            write_json(self.path, document)
        except OSError as e:
            raise StoreWriteError(self.path, str(e)) from e

        logger.debug("Saved %s", self.path)

    @staticmethod
    def _copy(document: Any) -> Any:
        return copy.deepcopy(document)

    @property
    def had_load_error(self) -> bool:
        """True if the last load of this store had to recover from a bad file."""
        return self._load_error is not None

    def get_load_error_message(self) -> str | None:
        """Diagnostic message from the last failed load, if any."""
        return self._load_error

    def file_exists(self) -> bool:
        """Check if the backing file exists."""
        return self.path.exists()

    def size_bytes(self) -> int | None:
        """Get size of the backing file in bytes, or None if absent."""
        if not self.file_exists():
            return None
        return self.path.stat().st_size

    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        raise NotImplementedError(f"{type(self).__name__} must implement summary_text")
