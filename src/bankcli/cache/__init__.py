"""
Cache Package

On-disk snapshots of fetched accounts and transactions.
"""

from .store import CACHE_FILE_NAME, CacheEntry, CacheInfo, CacheStore, EntryInfo, transaction_key

__all__ = [
    "CACHE_FILE_NAME",
    "CacheEntry",
    "CacheInfo",
    "CacheStore",
    "EntryInfo",
    "transaction_key",
]
