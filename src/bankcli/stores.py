#!/usr/bin/env python3
"""
Store Container

Builds each JSON document store for one config directory on first use. The
command layer creates one container per invocation and passes it down; there
are no module-level store instances.
"""

from functools import cached_property
from pathlib import Path

from .cache.store import CacheStore
from .core.datastore_mixin import JsonDocumentStore
from .merchants.store import MerchantMappingStore
from .queries.store import QueryStore
from .settings.store import ConfigStore


class Stores:
    """Lazily constructed stores sharing one config directory."""

    def __init__(self, config_dir: str | Path):
        self.config_dir = Path(config_dir)

    @cached_property
    def config(self) -> ConfigStore:
        return ConfigStore(self.config_dir)

    @cached_property
    def merchants(self) -> MerchantMappingStore:
        return MerchantMappingStore(self.config_dir)

    @cached_property
    def queries(self) -> QueryStore:
        return QueryStore(self.config_dir)

    @cached_property
    def cache(self) -> CacheStore:
        return CacheStore(self.config_dir)

    def all(self) -> list[JsonDocumentStore]:
        """Every store, constructing any not yet built."""
        return [self.config, self.merchants, self.queries, self.cache]

    def cache_enabled(self) -> bool:
        """Whether the cacheData setting is on."""
        return self.config.get_or_default("cacheData") is True
