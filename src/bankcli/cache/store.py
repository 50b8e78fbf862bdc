#!/usr/bin/env python3
"""
Cache Store

Time-stamped snapshots of fetched accounts and transactions persisted as
cache.json. The cache is a performance aid: failing to write it must never
abort the command that produced the data, so write failures are recorded and
logged instead of raised.

The document is loaded once per invocation and has no locking; concurrent
invocations race and the last writer wins.
"""

import hashlib
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.dates import utc_now_iso
from ..core.datastore_mixin import JsonDocumentStore
from ..core.errors import StoreWriteError

logger = logging.getLogger(__name__)

CACHE_FILE_NAME = "cache.json"

ENTRY_NAMES = ("transactions", "accounts")

Record = dict[str, Any]


@dataclass
class CacheEntry:
    """
    One cached collection.

    ``last_update`` is None exactly when ``items`` is empty; an entry is either
    fully populated or absent.
    """

    items: list[Record]
    last_update: str | None = None

    @classmethod
    def empty(cls) -> "CacheEntry":
        return cls(items=[])

    @classmethod
    def from_dict(cls, data: Any) -> "CacheEntry":
        """Create from the on-disk form; anything malformed becomes an empty entry."""
        if not isinstance(data, dict):
            return cls.empty()
        items = data.get("items")
        last_update = data.get("lastUpdate")
        if not isinstance(items, list) or not items or not isinstance(last_update, str):
            return cls.empty()
        return cls(items=items, last_update=last_update)

    def to_dict(self) -> dict[str, Any]:
        if not self.items:
            return {"items": []}
        return {"lastUpdate": self.last_update, "items": self.items}


@dataclass(frozen=True)
class EntryInfo:
    count: int
    last_update: str | None


@dataclass(frozen=True)
class CacheInfo:
    transactions: EntryInfo
    accounts: EntryInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            name: {"count": info.count, "lastUpdate": info.last_update}
            for name, info in (("transactions", self.transactions), ("accounts", self.accounts))
        }


def transaction_key(transaction: Record) -> str:
    """
    Identity of a transaction version for de-duplication.

    A record edited upstream (new updatedAt) is treated as a different version.
    """
    data = json.dumps(
        {
            "id": transaction.get("id"),
            "accountId": transaction.get("accountId"),
            "amount": transaction.get("amount"),
            "date": transaction.get("date"),
            "description": transaction.get("description"),
            "updatedAt": transaction.get("updatedAt"),
        },
        default=str,
    )
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


class CacheStore(JsonDocumentStore):
    """
    Store for cached account and transaction lists.

    Persistence failures are available from ``get_last_write_error`` and the
    in-memory cache keeps the new value. A successful write clears the error.
    """

    file_name = CACHE_FILE_NAME

    def __init__(self, config_dir: str | Path, file_name: str | None = None):
        super().__init__(config_dir, file_name)
        self._last_write_error: str | None = None
        document = self._load_document()
        self._entries: dict[str, CacheEntry] = {name: CacheEntry.from_dict(document.get(name)) for name in ENTRY_NAMES}

    def _persist(self) -> None:
        document = {name: entry.to_dict() for name, entry in self._entries.items()}
        try:
            self._save_document(document)
        except StoreWriteError as e:
            self._last_write_error = str(e)
            logger.warning("Cache not saved: %s", e)
            return
        self._last_write_error = None

    def _set(self, name: str, items: list[Record]) -> None:
        items = self._copy(list(items))
        self._entries[name] = CacheEntry(items=items, last_update=utc_now_iso() if items else None)
        self._persist()

    def get_cache_info(self) -> CacheInfo:
        """Counts and last-update timestamps of both collections."""
        return CacheInfo(
            **{
                name: EntryInfo(count=len(entry.items), last_update=entry.last_update)
                for name, entry in self._entries.items()
            }
        )

    def get_transactions(self) -> list[Record]:
        return self._copy(self._entries["transactions"].items)

    def get_accounts(self) -> list[Record]:
        return self._copy(self._entries["accounts"].items)

    def set_transactions(self, items: list[Record]) -> None:
        """Replace cached transactions and stamp them with the current time."""
        self._set("transactions", items)
        logger.debug("Cached %d transactions", len(self._entries["transactions"].items))

    def set_accounts(self, items: list[Record]) -> None:
        """Replace cached accounts and stamp them with the current time."""
        self._set("accounts", items)
        logger.debug("Cached %d accounts", len(self._entries["accounts"].items))

    def update_transactions(self, items: list[Record]) -> int:
        """
        Append transactions that are not already cached.

        Existing records keep their position; new ones follow in the order
        given. Nothing is written if every record is already present.

        Returns:
            Number of records added
        """
        cached = self._entries["transactions"].items
        seen = {transaction_key(tx) for tx in cached}
        added = []
        for tx in items:
            key = transaction_key(tx)
            if key not in seen:
                seen.add(key)
                added.append(tx)

        if added:
            self._set("transactions", cached + added)
        return len(added)

    def clear_cache(self) -> None:
        self._entries = {name: CacheEntry.empty() for name in ENTRY_NAMES}
        self._persist()
        logger.info("Cache cleared")

    def clear_account_cache(self) -> None:
        self._entries["accounts"] = CacheEntry.empty()
        self._persist()

    def clear_transaction_cache(self) -> None:
        self._entries["transactions"] = CacheEntry.empty()
        self._persist()

    def get_last_write_error(self) -> str | None:
        """Message from the most recent failed write, or None if the last write succeeded."""
        return self._last_write_error

    def _with_cache(
        self,
        name: str,
        fetch: Callable[[], list[Record]],
        refresh: bool,
        enabled: bool,
    ) -> tuple[list[Record], bool]:
        entry = self._entries[name]
        if enabled and not refresh and entry.items:
            logger.debug("Using %d cached %s", len(entry.items), name)
            return self._copy(entry.items), True

        items = list(fetch())
        if enabled:
            self._set(name, items)
        return items, False

    def transactions_with_cache(
        self,
        fetch: Callable[[], list[Record]],
        refresh: bool = False,
        enabled: bool = True,
    ) -> tuple[list[Record], bool]:
        """
        Return cached transactions, or fetch them.

        Args:
            fetch: Called when the cache is disabled, empty or being refreshed
            refresh: Ignore cached data and fetch again
            enabled: Whether caching is turned on (the cacheData setting)

        Returns:
            Tuple of (transactions, served_from_cache)
        """
        return self._with_cache("transactions", fetch, refresh, enabled)

    def accounts_with_cache(
        self,
        fetch: Callable[[], list[Record]],
        refresh: bool = False,
        enabled: bool = True,
    ) -> tuple[list[Record], bool]:
        """Accounts counterpart of ``transactions_with_cache``."""
        return self._with_cache("accounts", fetch, refresh, enabled)

    def summary_text(self) -> str:
        info = self.get_cache_info()
        parts = []
        for name, entry in (("transactions", info.transactions), ("accounts", info.accounts)):
            if entry.count:
                parts.append(f"{entry.count} {name} (updated {entry.last_update})")
            else:
                parts.append(f"no {name}")
        return "Cache: " + ", ".join(parts)
