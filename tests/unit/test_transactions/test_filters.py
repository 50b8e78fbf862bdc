#!/usr/bin/env python3
"""Tests for transaction filter evaluation."""

import pytest

from bankcli.core.errors import ValidationError
from bankcli.transactions.filters import describe_filter, filter_transactions, matches
from bankcli.transactions.models import TransactionFilter


def _ids(transactions):
    return [tx["id"] for tx in transactions]


@pytest.mark.unit
class TestMatches:
    """Test individual predicates."""

    def test_empty_filter_matches_everything(self, sample_transactions):
        """Test absent predicates impose no constraint."""
        assert filter_transactions(sample_transactions, TransactionFilter()) == sample_transactions
        assert filter_transactions(sample_transactions, None) == sample_transactions

    def test_exact_fields_are_case_sensitive(self, sample_transactions):
        """Test category matching is exact."""
        assert _ids(filter_transactions(sample_transactions, {"parentCategory": "food"})) == [
            "trans_001",
            "trans_002",
            "trans_005",
        ]
        assert filter_transactions(sample_transactions, {"parentCategory": "Food"}) == []
        assert filter_transactions(sample_transactions, {"category": "Supermarkets"}) == []

    def test_account_and_type(self, sample_transactions):
        """Test accountId and type predicates combine with AND."""
        result = filter_transactions(sample_transactions, TransactionFilter(account_id="acc_002", type="TRANSFER"))
        assert _ids(result) == ["trans_004"]

    def test_merchant_any_of_case_insensitive(self, sample_transactions):
        """Test comma-separated merchants, including the nested merchant object."""
        result = filter_transactions(sample_transactions, TransactionFilter(merchant=" countdown , PAK N SAVE"))
        assert _ids(result) == ["trans_001", "trans_005"]

    def test_merchant_is_not_substring(self, sample_transactions):
        """Test merchant matching is whole-name equality."""
        assert filter_transactions(sample_transactions, TransactionFilter(merchant="Count")) == []

    def test_blank_merchant_tokens_impose_nothing(self, sample_transactions):
        """Test a merchant filter of only commas and spaces matches everything."""
        assert filter_transactions(sample_transactions, TransactionFilter(merchant=" , ,")) == sample_transactions

    def test_direction(self, sample_transactions):
        """Test in means zero or positive and out means negative."""
        assert _ids(filter_transactions(sample_transactions, TransactionFilter(direction="in"))) == ["trans_003"]
        assert "trans_003" not in _ids(filter_transactions(sample_transactions, TransactionFilter(direction="out")))
        assert matches({"amount": 0}, TransactionFilter(direction="in"))
        assert not matches({"amount": 0}, TransactionFilter(direction="out"))

    def test_direction_and_amount_bounds(self, sample_transactions):
        """Test outflows with absolute amount in [10, 50]."""
        filters = {"direction": "out", "minAmount": 10, "maxAmount": 50}
        assert _ids(filter_transactions(sample_transactions, filters)) == ["trans_001", "trans_002", "trans_006"]

    def test_amount_bounds_are_inclusive_in_cents(self):
        """Test float amounts on the boundary still match."""
        assert matches({"amount": -50.0}, TransactionFilter(max_amount=50))
        assert matches({"amount": 0.1 + 0.2}, TransactionFilter(min_amount=0.3, max_amount=0.3))
        assert not matches({"amount": -50.01}, TransactionFilter(max_amount=50))

    def test_unreadable_amount_never_matches_amount_predicates(self):
        """Test records without a numeric amount fail amount predicates."""
        assert not matches({"amount": "lots"}, TransactionFilter(min_amount=1))
        assert matches({"amount": "lots"}, TransactionFilter())

    def test_date_bounds_inclusive_ignoring_time(self, sample_transactions):
        """Test since/until compare calendar dates."""
        result = filter_transactions(sample_transactions, TransactionFilter(since="2024-03-01", until="2024-03-02"))
        assert _ids(result) == ["trans_001", "trans_002"]

    def test_missing_date_never_matches_date_bound(self):
        """Test records without a usable date fail a date bound."""
        assert not matches({"date": None}, TransactionFilter(since="2024-01-01"))
        assert not matches({"date": "garbage"}, TransactionFilter(until="2024-01-01"))
        assert not matches({}, TransactionFilter(since="2024-01-01"))

    def test_search_matches_id_or_description(self, sample_transactions):
        """Test search by exact id or description substring, ignoring case."""
        assert _ids(filter_transactions(sample_transactions, TransactionFilter(search="TRANS_004"))) == ["trans_004"]
        assert _ids(filter_transactions(sample_transactions, TransactionFilter(search="payroll"))) == ["trans_003"]

    def test_preserves_order_and_identity(self, sample_transactions):
        """Test results keep input order and are the same objects."""
        reversed_input = list(reversed(sample_transactions))
        result = filter_transactions(reversed_input, TransactionFilter(parent_category="food"))

        assert _ids(result) == ["trans_005", "trans_002", "trans_001"]
        assert result[0] is reversed_input[1]


@pytest.mark.unit
class TestDictionaryFilters:
    """Test filters given in their camelCase dictionary form."""

    def test_valid_dictionary_filter(self, sample_transactions):
        """Test a well-formed dictionary behaves like the dataclass."""
        result = filter_transactions(sample_transactions, {"minAmount": 50, "since": "2024-03-04"})
        assert _ids(result) == ["trans_004", "trans_005"]

    @pytest.mark.parametrize(
        "filters",
        [
            {"minAmount": "abc"},
            {"since": "7d"},
            {"since": "2024-03-05", "until": "2024-03-01"},
            {"direction": "sideways"},
        ],
    )
    def test_malformed_dictionary_rejected(self, sample_transactions, filters):
        """Test a malformed dictionary raises ValidationError instead of silently matching nothing."""
        with pytest.raises(ValidationError):
            matches(sample_transactions[0], filters)
        with pytest.raises(ValidationError):
            filter_transactions(sample_transactions, filters)

    def test_describe_does_not_validate(self):
        """Test describing a dictionary works even when it would not validate."""
        assert describe_filter({"since": "7d", "extra": 1}) == ['since="7d"']


class TestDescribeFilter:
    """Test human-readable filter descriptions."""

    @pytest.mark.unit
    def test_describe(self):
        """Test strings are quoted and numbers are not."""
        described = describe_filter(TransactionFilter(merchant="Countdown", min_amount=10))
        assert described == ['merchant="Countdown"', "minAmount=10"]

    @pytest.mark.unit
    def test_describe_empty(self):
        """Test an empty filter describes as nothing."""
        assert describe_filter(None) == []
