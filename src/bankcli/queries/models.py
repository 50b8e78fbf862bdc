#!/usr/bin/env python3
"""
Saved Query Model
"""

from dataclasses import dataclass, field, replace
from typing import Any

from ..core.errors import ValidationError
from ..transactions.models import TransactionFilter


@dataclass
class SavedQuery:
    """A named, reusable transaction filter."""

    name: str
    filters: TransactionFilter = field(default_factory=TransactionFilter)
    created_at: str = ""
    description: str | None = None
    last_used: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedQuery":
        """
        Create from the on-disk form.

        Raises:
            ValidationError: If the entry is missing its name or filters object
        """
        name = data.get("name")
        filters = data.get("filters")
        if not isinstance(name, str) or not isinstance(filters, dict):
            raise ValidationError("saved query must have a string 'name' and a 'filters' object")
        return cls(
            name=name,
            filters=TransactionFilter.from_dict(filters),
            created_at=data.get("createdAt") or "",
            description=data.get("description"),
            last_used=data.get("lastUsed"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk form, leaving out unset optional fields."""
        result: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            result["description"] = self.description
        result["filters"] = self.filters.to_dict()
        result["createdAt"] = self.created_at
        if self.last_used is not None:
            result["lastUsed"] = self.last_used
        return result

    def renamed(self, name: str) -> "SavedQuery":
        return replace(self, name=name)
