#!/usr/bin/env python3
"""
Merchant Mapping Import / Export

Validates externally supplied mapping documents and combines them with the
existing map before the caller writes the result back to the store.
"""

from dataclasses import dataclass
from typing import Any

from ..core.errors import ValidationError
from .store import MerchantCategory, normalise_merchant_name


@dataclass
class MergeResult:
    """Outcome of combining imported mappings with existing ones."""

    mappings: dict[str, MerchantCategory]
    imported: int
    added: int
    updated: int

    @property
    def total(self) -> int:
        return len(self.mappings)


def validate_merchant_map_structure(data: Any) -> dict[str, MerchantCategory]:
    """
    Check that an import document is a merchant map and convert it.

    Args:
        data: Parsed JSON from the import file

    Returns:
        Mappings keyed by normalised merchant name

    Raises:
        ValidationError: If the document or any entry has the wrong shape
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid format: expected a JSON object with merchant mappings.")

    mappings: dict[str, MerchantCategory] = {}
    for key, value in data.items():
        if not isinstance(value, dict):
            raise ValidationError(f'Invalid mapping for "{key}": expected object with parent and category.')
        if not isinstance(value.get("parent"), str) or not isinstance(value.get("category"), str):
            raise ValidationError(
                f'Invalid mapping for "{key}": must have "parent" and "category" string properties.'
            )
        normalised = normalise_merchant_name(key)
        if not normalised:
            raise ValidationError("Invalid mapping: merchant name cannot be empty.")
        try:
            mappings[normalised] = MerchantCategory.from_dict(value)
        except ValidationError as e:
            raise ValidationError(f'Invalid mapping for "{key}": {e}') from None

    return mappings


def merge_mappings(
    existing: dict[str, MerchantCategory],
    imported: dict[str, MerchantCategory],
    merge: bool,
) -> MergeResult:
    """
    Combine imported mappings with existing ones.

    Args:
        existing: Mappings currently in the store
        imported: Validated mappings from the import file
        merge: If False the import replaces everything; if True existing keys
               not in the import are kept and imported keys overwrite or append

    Returns:
        MergeResult with the final mappings and counts
    """
    if not merge:
        return MergeResult(mappings=dict(imported), imported=len(imported), added=len(imported), updated=0)

    combined = dict(existing)
    added = 0
    updated = 0
    for key, category in imported.items():
        if key in combined:
            updated += 1
        else:
            added += 1
        combined[key] = category

    return MergeResult(mappings=combined, imported=len(imported), added=added, updated=updated)


def export_mappings(mappings: dict[str, MerchantCategory]) -> dict[str, dict[str, str]]:
    """Convert mappings to a JSON-ready dictionary sorted by merchant key."""
    return {key: mappings[key].to_dict() for key in sorted(mappings)}
