#!/usr/bin/env python3
"""
Query Store

Named transaction filters persisted as queries.json, keyed by query name.
Every operation re-reads the file. There is no locking: two invocations
saving at the same time race and the last writer wins.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..core.dates import parse_timestamp, utc_now_iso
from ..core.datastore_mixin import JsonDocumentStore
from ..core.errors import DuplicateError, ValidationError
from ..transactions.models import TransactionFilter
from .models import SavedQuery

logger = logging.getLogger(__name__)

QUERIES_FILE_NAME = "queries.json"
MAX_QUERY_NAME_LENGTH = 64

_QUERY_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

# Sort key for entries whose createdAt cannot be parsed
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class QueryNameValidation:
    valid: bool
    error: str | None = None


def validate_query_name(name: str) -> QueryNameValidation:
    """
    Check a query name after trimming surrounding whitespace.

    Valid names are 1-64 characters of letters, digits, hyphens and underscores.
    """
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed:
        return QueryNameValidation(False, "Query name cannot be empty")
    if len(trimmed) > MAX_QUERY_NAME_LENGTH:
        return QueryNameValidation(False, f"Query name must be {MAX_QUERY_NAME_LENGTH} characters or less")
    if not _QUERY_NAME_RE.match(trimmed):
        return QueryNameValidation(
            False, "Query name can only contain letters, numbers, hyphens, and underscores"
        )
    return QueryNameValidation(True)


def _require_valid_name(name: str) -> str:
    result = validate_query_name(name)
    if not result.valid:
        raise ValidationError(result.error)
    return name.strip()


class QueryStore(JsonDocumentStore):
    """
    Store for saved queries.

    Not-found is reported as None/False. Write failures raise
    ``StoreWriteError``; a corrupted file loads as an empty collection with
    the reason available from ``get_load_error_message``.
    """

    file_name = QUERIES_FILE_NAME

    def _load_queries(self) -> dict[str, dict[str, Any]]:
        return self._load_document()

    def _parse(self, key: str, entry: Any) -> SavedQuery | None:
        if not isinstance(entry, dict):
            logger.warning("Ignoring saved query '%s': not an object", key)
            return None
        try:
            return SavedQuery.from_dict(entry)
        except ValidationError as e:
            logger.warning("Ignoring saved query '%s': %s", key, e)
            return None

    def save(
        self,
        name: str,
        filters: TransactionFilter | dict[str, Any],
        description: str | None = None,
    ) -> SavedQuery:
        """
        Save a new query.

        Args:
            name: Query name (trimmed before use)
            filters: At least one predicate must be set
            description: Optional free text

        Returns:
            The stored SavedQuery

        Raises:
            ValidationError: Bad name, empty filter, or invalid amount/date range
            DuplicateError: A query with this name already exists
            StoreWriteError: If queries.json cannot be written
        """
        key = _require_valid_name(name)
        if not isinstance(filters, TransactionFilter):
            filters = TransactionFilter.from_dict(filters)
        if filters.is_empty():
            raise ValidationError("At least one filter is required to save a query")
        filters.validate()

        queries = self._load_queries()
        if key in queries:
            raise DuplicateError(f'Query "{key}" already exists')

        query = SavedQuery(name=key, filters=filters, created_at=utc_now_iso(), description=description)
        queries[key] = query.to_dict()
        self._save_document(queries)
        logger.info("Saved query '%s'", key)
        return query

    def get(self, name: str) -> SavedQuery | None:
        key = name.strip()
        entry = self._load_queries().get(key)
        if entry is None:
            return None
        return self._parse(key, entry)

    def list(self) -> list[SavedQuery]:
        """All saved queries, newest first (ties keep file order)."""
        queries = [
            query for key, entry in self._load_queries().items() if (query := self._parse(key, entry)) is not None
        ]
        return sorted(queries, key=lambda q: parse_timestamp(q.created_at) or _EPOCH, reverse=True)

    def delete(self, name: str) -> bool:
        """
        Remove a query.

        Returns:
            True if it existed and was removed

        Raises:
            StoreWriteError: If queries.json cannot be written
        """
        key = name.strip()
        queries = self._load_queries()
        if key not in queries:
            return False
        del queries[key]
        self._save_document(queries)
        logger.info("Deleted query '%s'", key)
        return True

    def mark_used(self, name: str) -> None:
        """Stamp lastUsed with the current time; does nothing if the query is absent."""
        key = name.strip()
        queries = self._load_queries()
        entry = queries.get(key)
        if not isinstance(entry, dict):
            return
        entry["lastUsed"] = utc_now_iso()
        self._save_document(queries)

    def exists(self, name: str) -> bool:
        return name.strip() in self._load_queries()

    def rename(self, old_name: str, new_name: str) -> bool:
        """
        Rename a query, keeping its position in the file.

        Returns:
            False without changing anything if old_name is absent or new_name is taken

        Raises:
            ValidationError: If new_name is not a valid query name
            StoreWriteError: If queries.json cannot be written
        """
        new_key = _require_valid_name(new_name)
        old_key = old_name.strip()
        queries = self._load_queries()
        if old_key not in queries or new_key in queries:
            return False

        renamed: dict[str, Any] = {}
        for key, entry in queries.items():
            if key == old_key:
                if isinstance(entry, dict):
                    entry = {**entry, "name": new_key}
                renamed[new_key] = entry
            else:
                renamed[key] = entry

        self._save_document(renamed)
        logger.info("Renamed query '%s' to '%s'", old_key, new_key)
        return True

    def summary_text(self) -> str:
        count = len(self._load_queries())
        return f"Saved queries: {count}"
