#!/usr/bin/env python3
"""
Transaction Filter Evaluation

Pure functions that select transaction records matching a TransactionFilter.
Records are the JSON-like dictionaries supplied by the fetch collaborator
(id, date, amount, type, category, parentCategory, merchant, accountId,
description); nothing here reads or writes files.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money
from .models import TransactionFilter, validate_amount_range

# Filter attribute -> record field, compared exactly
_EXACT_FIELDS = (
    ("account_id", "accountId"),
    ("category", "category"),
    ("parent_category", "parentCategory"),
    ("type", "type"),
)

__all__ = [
    "describe_filter",
    "filter_transactions",
    "matches",
    "merchant_name",
    "merchant_tokens",
    "validate_amount_range",
]


def _coerce(filters: TransactionFilter | Mapping[str, Any] | None) -> TransactionFilter:
    """Build a filter from any accepted form; the dictionary form is validated here."""
    if filters is None:
        return TransactionFilter()
    if isinstance(filters, TransactionFilter):
        return filters
    coerced = TransactionFilter.from_dict(dict(filters))
    coerced.validate()
    return coerced


def merchant_name(transaction: Mapping[str, Any]) -> str:
    """
    Merchant name of a record.

    Accepts both a plain string and the API's nested {"name": ...} object.
    """
    merchant = transaction.get("merchant")
    if isinstance(merchant, Mapping):
        merchant = merchant.get("name")
    return merchant if isinstance(merchant, str) else ""


def merchant_tokens(value: str) -> list[str]:
    """Split a comma-separated merchant filter into lower-cased names, dropping blanks."""
    return [token.strip().lower() for token in value.split(",") if token.strip()]


def _amount(transaction: Mapping[str, Any]) -> Money | None:
    try:
        return Money.from_dollars(transaction.get("amount", 0))
    except ValueError:
        return None


def matches(transaction: Mapping[str, Any], filters: TransactionFilter | Mapping[str, Any] | None) -> bool:
    """
    Check whether a transaction satisfies every set predicate of a filter.

    A TransactionFilter is taken as already validated (the command layer and
    QueryStore.save both validate). A dictionary is validated on the way in.
    Unreadable fields in the record never raise; the predicate fails instead.

    Args:
        transaction: Transaction record
        filters: TransactionFilter, or its camelCase dictionary form

    Returns:
        True if all set predicates match (always True for an empty filter)

    Raises:
        ValidationError: If a dictionary filter is malformed
    """
    filters = _coerce(filters)

    for attr, field in _EXACT_FIELDS:
        expected = getattr(filters, attr)
        if expected is not None and transaction.get(field) != expected:
            return False

    if filters.merchant is not None:
        tokens = merchant_tokens(filters.merchant)
        # A filter of only blanks would otherwise match nothing
        if tokens and merchant_name(transaction).strip().lower() not in tokens:
            return False

    if filters.direction is not None or filters.min_amount is not None or filters.max_amount is not None:
        amount = _amount(transaction)
        if amount is None:
            return False
        if filters.direction == "out" and amount.cents >= 0:
            return False
        if filters.direction == "in" and amount.cents < 0:
            return False
        if filters.min_amount is not None and amount.abs() < Money.from_dollars(filters.min_amount):
            return False
        if filters.max_amount is not None and amount.abs() > Money.from_dollars(filters.max_amount):
            return False

    if filters.since is not None or filters.until is not None:
        tx_date = FinancialDate.from_value(transaction.get("date"))
        if tx_date is None:
            return False
        if filters.since is not None:
            since = FinancialDate.from_value(filters.since)
            if since is None or tx_date < since:
                return False
        if filters.until is not None:
            until = FinancialDate.from_value(filters.until)
            if until is None or tx_date > until:
                return False

    if filters.search is not None:
        term = filters.search.lower()
        tx_id = str(transaction.get("id") or "").lower()
        description = str(transaction.get("description") or "").lower()
        if tx_id != term and term not in description:
            return False

    return True


def filter_transactions(
    transactions: Iterable[Mapping[str, Any]],
    filters: TransactionFilter | Mapping[str, Any] | None,
) -> list[Mapping[str, Any]]:
    """
    Select matching transactions, preserving their original relative order.

    Args:
        transactions: Transaction records
        filters: TransactionFilter or camelCase dictionary

    Returns:
        List of the matching records (the same objects, not copies)

    Raises:
        ValidationError: If a dictionary filter is malformed
    """
    filters = _coerce(filters)
    return [tx for tx in transactions if matches(tx, filters)]


def describe_filter(filters: TransactionFilter | Mapping[str, Any] | None) -> list[str]:
    """
    Human-readable list of the set predicates, e.g. ['merchant="Countdown"', 'minAmount=10'].

    Used when a query returns nothing, to show what was applied.
    """
    if isinstance(filters, Mapping):
        filters = TransactionFilter.from_dict(dict(filters))
    described = []
    for key, value in _coerce(filters).to_dict().items():
        if isinstance(value, str):
            described.append(f'{key}="{value}"')
        else:
            described.append(f"{key}={value}")
    return described
