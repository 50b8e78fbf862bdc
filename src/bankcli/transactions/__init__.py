"""
Transactions Package

Filter model and evaluation over transaction records, plus spending analysis.
"""

from .analysis import (
    EXCLUDED_TRANSACTION_TYPES,
    UNCATEGORISED,
    TransactionSummary,
    apply_merchant_mappings,
    category_breakdown,
    summarize,
)
from .filters import describe_filter, filter_transactions, matches, merchant_name
from .models import DIRECTIONS, TransactionFilter, validate_amount_range

__all__ = [
    "DIRECTIONS",
    "EXCLUDED_TRANSACTION_TYPES",
    "TransactionFilter",
    "TransactionSummary",
    "UNCATEGORISED",
    "apply_merchant_mappings",
    "category_breakdown",
    "describe_filter",
    "filter_transactions",
    "matches",
    "merchant_name",
    "summarize",
    "validate_amount_range",
]
