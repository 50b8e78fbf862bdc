#!/usr/bin/env python3
"""
Merchant Mapping Store

User-defined merchant → category overrides persisted as merchant_map.json.
Every operation re-reads the file, so the store always reflects the latest
write from any invocation (no locking; concurrent writers race and the last
one wins).
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..core.datastore_mixin import JsonDocumentStore
from ..core.errors import ValidationError

logger = logging.getLogger(__name__)

MERCHANT_MAP_FILE_NAME = "merchant_map.json"


def normalise_merchant_name(name: str) -> str:
    """
    Build the lookup key for a merchant name.

    Lower-cases and collapses runs of whitespace so that "Pak N  Save" and
    "pak n save" share one mapping.
    """
    return " ".join(name.lower().split())


@dataclass(frozen=True)
class MerchantCategory:
    """Parent and detailed category assigned to a merchant."""

    parent: str
    category: str

    def __post_init__(self) -> None:
        for field_name in ("parent", "category"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"Merchant category '{field_name}' must be a non-empty string")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerchantCategory":
        """Create from the on-disk {"parent": ..., "category": ...} form."""
        return cls(parent=data.get("parent"), category=data.get("category"))  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, str]:
        """Convert to the on-disk form."""
        return {"parent": self.parent, "category": self.category}


class MerchantMappingStore(JsonDocumentStore):
    """
    Store for merchant categorization mappings.

    The store holds no merge logic: callers combine mappings before calling
    ``save_merchant_map``. Write failures raise ``StoreWriteError``.
    """

    file_name = MERCHANT_MAP_FILE_NAME

    def load_merchant_map(self) -> dict[str, MerchantCategory]:
        """Read all mappings, skipping entries that are not valid categories."""
        mappings: dict[str, MerchantCategory] = {}
        for key, value in self._load_document().items():
            if not isinstance(value, dict):
                logger.warning("Ignoring merchant mapping for '%s': not an object", key)
                continue
            try:
                mappings[normalise_merchant_name(key)] = MerchantCategory.from_dict(value)
            except ValidationError as e:
                logger.warning("Ignoring merchant mapping for '%s': %s", key, e)
        return mappings

    def save_merchant_map(self, mappings: dict[str, MerchantCategory]) -> None:
        """
        Replace every mapping with the given ones.

        Raises:
            StoreWriteError: If merchant_map.json cannot be written
        """
        document = {normalise_merchant_name(key): category.to_dict() for key, category in mappings.items()}
        self._save_document(document)
        logger.info("Saved %d merchant mappings", len(document))

    def get_all_mappings(self) -> dict[str, MerchantCategory]:
        return self.load_merchant_map()

    def get_merchant_category(self, key: str) -> MerchantCategory | None:
        return self.load_merchant_map().get(normalise_merchant_name(key))

    def has_merchant_mapping(self, key: str) -> bool:
        return normalise_merchant_name(key) in self.load_merchant_map()

    def upsert_merchant_category(self, key: str, category: MerchantCategory) -> None:
        """
        Set the category for one merchant (load, set, save).

        Works on the raw document: other entries, including ones
        ``load_merchant_map`` skips as invalid, are written back unchanged.

        Raises:
            ValidationError: If the key is blank
            StoreWriteError: If merchant_map.json cannot be written
        """
        normalised = normalise_merchant_name(key)
        if not normalised:
            raise ValidationError("Merchant name cannot be empty")

        document = {
            existing: value
            for existing, value in self._load_document().items()
            if normalise_merchant_name(existing) != normalised
        }
        document[normalised] = category.to_dict()
        self._save_document(document)
        logger.info("Mapped merchant '%s'", normalised)

    def clear_all_mappings(self) -> None:
        """Remove every mapping by writing an empty document."""
        self.save_merchant_map({})

    def summary_text(self) -> str:
        count = len(self.load_merchant_map())
        return f"Merchant mappings: {count}"
