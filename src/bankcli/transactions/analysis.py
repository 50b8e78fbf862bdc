#!/usr/bin/env python3
"""
Spending Analysis

Applies user merchant mappings to transaction records and summarises
spending by parent category. Amounts are aggregated in integer cents.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import pandas as pd

from ..core.money import Money
from ..merchants.store import MerchantCategory, normalise_merchant_name
from .filters import merchant_name

logger = logging.getLogger(__name__)

# Transaction types left out of spending figures
EXCLUDED_TRANSACTION_TYPES = frozenset({"TRANSFER"})

UNCATEGORISED = "uncategorised"


def is_excluded_transaction_type(transaction_type: Any) -> bool:
    return isinstance(transaction_type, str) and transaction_type.upper() in EXCLUDED_TRANSACTION_TYPES


@dataclass(frozen=True)
class TransactionSummary:
    """Totals over a set of transactions."""

    count: int
    total: Money
    spending: Money

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalTransactions": self.count,
            "totalAmount": self.total.to_dollars(),
            "totalSpending": self.spending.to_dollars(),
        }


def apply_merchant_mappings(
    transactions: Iterable[Mapping[str, Any]],
    mappings: Mapping[str, MerchantCategory],
) -> list[dict[str, Any]]:
    """
    Override categories using the user's merchant map.

    Args:
        transactions: Transaction records
        mappings: Normalised merchant name -> MerchantCategory

    Returns:
        New records; the inputs are left untouched
    """
    result = []
    overridden = 0
    for tx in transactions:
        record = dict(tx)
        name = merchant_name(tx)
        mapping = mappings.get(normalise_merchant_name(name)) if name else None
        if mapping is not None:
            record["parentCategory"] = mapping.parent
            record["category"] = mapping.category
            overridden += 1
        result.append(record)

    if overridden:
        logger.debug("Merchant mappings applied to %d transactions", overridden)
    return result


def transactions_to_dataframe(transactions: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Flatten transaction records into a DataFrame for aggregation.

    Records whose amount cannot be read are skipped with a warning.
    """
    rows = []
    for tx in transactions:
        try:
            cents = Money.from_dollars(tx.get("amount", 0)).to_cents()
        except ValueError as e:
            logger.warning("Skipping transaction %s: %s", tx.get("id", "unknown"), e)
            continue
        parent = tx.get("parentCategory")
        parent = parent.lower().strip() if isinstance(parent, str) else ""
        rows.append(
            {
                "id": tx.get("id"),
                "amount_cents": cents,
                "type": tx.get("type") or "",
                "parent": parent or UNCATEGORISED,
            }
        )

    return pd.DataFrame(rows, columns=["id", "amount_cents", "type", "parent"])


def _spending_rows(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return df
    excluded = df["type"].map(is_excluded_transaction_type).astype(bool)
    return df[(df["amount_cents"] < 0) & ~excluded]


def category_breakdown(transactions: Iterable[Mapping[str, Any]]) -> dict[str, float]:
    """
    Total spending per parent category, largest first.

    Only outflows count and transfers are excluded. Ties keep alphabetical order.

    Returns:
        Parent category -> total spent in dollars
    """
    spending = _spending_rows(transactions_to_dataframe(transactions))
    if spending.empty:
        return {}

    totals = spending["amount_cents"].abs().groupby(spending["parent"]).sum()
    totals = totals.sort_values(ascending=False, kind="stable")
    return {str(parent): Money.from_cents(int(cents)).to_dollars() for parent, cents in totals.items()}


def summarize(transactions: Iterable[Mapping[str, Any]]) -> TransactionSummary:
    """
    Count, net total and spending total of a set of transactions.

    Spending is the absolute sum of outflows, excluding transfers.
    """
    df = transactions_to_dataframe(transactions)
    if df.empty:
        return TransactionSummary(count=0, total=Money.from_cents(0), spending=Money.from_cents(0))

    spending = _spending_rows(df)
    return TransactionSummary(
        count=len(df),
        total=Money.from_cents(int(df["amount_cents"].sum())),
        spending=Money.from_cents(int(spending["amount_cents"].abs().sum())),
    )
