#!/usr/bin/env python3
"""Performance tests with realistic data volumes."""

import time

import pytest

from bankcli.cache.store import CacheStore
from bankcli.transactions.analysis import category_breakdown, summarize
from bankcli.transactions.filters import filter_transactions
from bankcli.transactions.models import TransactionFilter
from tests.fixtures.synthetic_data import generate_synthetic_transactions


@pytest.mark.slow
@pytest.mark.performance
def test_filter_and_breakdown_large_history(temp_dir):
    """Test filtering and summarising two years of transactions."""
    # ~10 transactions per day for 2 years
    transactions = generate_synthetic_transactions(7300, seed=42)

    store = CacheStore(temp_dir)
    start = time.time()
    store.set_transactions(transactions)
    cached = CacheStore(temp_dir).get_transactions()
    filtered = filter_transactions(cached, TransactionFilter(direction="out", min_amount=10, search="count"))
    breakdown = category_breakdown(cached)
    summary = summarize(cached)
    elapsed = time.time() - start

    assert len(cached) == 7300
    assert all(tx["amount"] <= -10 for tx in filtered)
    assert summary.count == 7300
    assert "transfers" not in breakdown
    assert elapsed < 10.0, f"Large history processing took {elapsed:.2f}s"


@pytest.mark.slow
@pytest.mark.performance
def test_update_transactions_deduplication_volume(temp_dir):
    """Test de-duplicating a large overlapping batch."""
    transactions = generate_synthetic_transactions(5000, seed=3)
    store = CacheStore(temp_dir)
    store.set_transactions(transactions[:4000])

    start = time.time()
    added = store.update_transactions(transactions[3000:])
    elapsed = time.time() - start

    assert added == 1000
    assert store.get_cache_info().transactions.count == 5000
    assert elapsed < 5.0, f"De-duplication took {elapsed:.2f}s"
