#!/usr/bin/env python3
"""
Transaction Filter Model

A sparse set of predicates selecting transactions. Saved queries persist it
with camelCase keys and leave unset predicates out of the document.
"""

from dataclasses import dataclass, fields
from typing import Any, Literal

from ..core.dates import FinancialDate, validate_date_range
from ..core.errors import ValidationError

Direction = Literal["in", "out"]

DIRECTIONS = ("in", "out")

# Largest amount accepted in a filter bound
AMOUNT_MAX_REASONABLE = 100_000_000_000

# Python attribute -> on-disk key
_DOCUMENT_KEYS = {
    "account_id": "accountId",
    "category": "category",
    "parent_category": "parentCategory",
    "merchant": "merchant",
    "type": "type",
    "direction": "direction",
    "min_amount": "minAmount",
    "max_amount": "maxAmount",
    "since": "since",
    "until": "until",
    "search": "search",
}


def validate_amount_range(min_amount: float | None = None, max_amount: float | None = None) -> None:
    """
    Validate amount filter bounds.

    Raises:
        ValidationError: If a bound is negative or too large, or min exceeds max
    """
    for label, value in (("minAmount", min_amount), ("maxAmount", max_amount)):
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int | float) or value != value:
            raise ValidationError(f"Invalid --{label}: {value!r}. Amount filters must be numbers.")
        if value < 0:
            raise ValidationError(f"Invalid --{label}: {value}. Amount filters must be non-negative.")
        if value > AMOUNT_MAX_REASONABLE:
            raise ValidationError(
                f"Invalid --{label}: {value}. Amount exceeds maximum allowed value ({AMOUNT_MAX_REASONABLE:,})."
            )

    if min_amount is not None and max_amount is not None and min_amount > max_amount:
        raise ValidationError(
            f"Invalid amount range: --minAmount ({min_amount}) is greater than --maxAmount ({max_amount})."
        )


@dataclass
class TransactionFilter:
    """
    Optional predicates over a transaction record. All set predicates must match.

    - account_id, category, parent_category, type: exact, case-sensitive
    - merchant: comma-separated names, any may match, case-insensitive
    - direction: "out" for negative amounts, "in" for zero or positive
    - min_amount / max_amount: inclusive bounds on the absolute amount
    - since / until: inclusive calendar-date bounds (YYYY-MM-DD)
    - search: transaction id, or a substring of the description
    """

    account_id: str | None = None
    category: str | None = None
    parent_category: str | None = None
    merchant: str | None = None
    type: str | None = None
    direction: Direction | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    since: str | None = None
    until: str | None = None
    search: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionFilter":
        """Create from the on-disk camelCase form, ignoring unknown keys."""
        return cls(**{attr: data.get(key) for attr, key in _DOCUMENT_KEYS.items()})

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk camelCase form, omitting unset predicates."""
        return {
            _DOCUMENT_KEYS[f.name]: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        """True if no predicate is set; an empty filter matches every transaction."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def validate(self) -> None:
        """
        Check the predicates are well-formed.

        Raises:
            ValidationError: On a bad direction, amount range or date range
        """
        if self.direction is not None and self.direction not in DIRECTIONS:
            raise ValidationError(f'Invalid direction: "{self.direction}". Use "in" or "out".')

        validate_amount_range(self.min_amount, self.max_amount)

        bounds = {}
        for label in ("since", "until"):
            value = getattr(self, label)
            if value is None:
                continue
            parsed = FinancialDate.from_value(value) if isinstance(value, str) and len(value) == 10 else None
            if parsed is None:
                raise ValidationError(f'Invalid date for --{label}: "{value}". Expected YYYY-MM-DD.')
            bounds[label] = parsed

        if "since" in bounds and "until" in bounds:
            validate_date_range(bounds["since"].date, bounds["until"].date)
