"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_transactions() -> list[dict[str, Any]]:
    """Small mixed set of transactions covering both directions and a transfer."""
    return [
        {
            "id": "trans_001",
            "date": "2024-03-01T09:15:00.000Z",
            "amount": -45.99,
            "type": "EFTPOS",
            "category": "Supermarkets and grocery stores",
            "parentCategory": "food",
            "merchant": "Countdown",
            "accountId": "acc_001",
            "description": "COUNTDOWN METRO 1234",
        },
        {
            "id": "trans_002",
            "date": "2024-03-02",
            "amount": -12.5,
            "type": "EFTPOS",
            "category": "Cafes and restaurants",
            "parentCategory": "food",
            "merchant": "Sample Coffee Shop",
            "accountId": "acc_001",
            "description": "SAMPLE COFFEE",
        },
        {
            "id": "trans_003",
            "date": "2024-03-03",
            "amount": 2500.0,
            "type": "CREDIT",
            "category": "Salary",
            "parentCategory": "income",
            "merchant": "",
            "accountId": "acc_002",
            "description": "PAYROLL ACME LTD",
        },
        {
            "id": "trans_004",
            "date": "2024-03-04",
            "amount": -500.0,
            "type": "TRANSFER",
            "category": "Transfers",
            "parentCategory": "transfers",
            "merchant": "",
            "accountId": "acc_002",
            "description": "TRANSFER TO SAVINGS",
        },
        {
            "id": "trans_005",
            "date": "2024-03-05",
            "amount": -89.0,
            "type": "EFTPOS",
            "category": "Supermarkets and grocery stores",
            "parentCategory": "food",
            "merchant": {"name": "Pak N Save"},
            "accountId": "acc_001",
            "description": "PAK N SAVE ALBANY",
        },
        {
            "id": "trans_006",
            "date": "2024-03-06",
            "amount": -10.0,
            "type": "DIRECT DEBIT",
            "category": "Fuel",
            "parentCategory": "transport",
            "merchant": "Test Gas Station",
            "accountId": "acc_001",
            "description": "TEST GAS 99",
        },
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests never touch the real ~/.bankcli
    monkeypatch.setenv("BANKCLI_ENV", "test")
    monkeypatch.setenv("BANKCLI_CONFIG_DIR", str(tmp_path / "bankcli_home"))
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the installed command")
    config.addinivalue_line("markers", "stores: Tests for the JSON document stores")
    config.addinivalue_line("markers", "cli: Tests for the command-line interface")
    config.addinivalue_line("markers", "slow: Tests that take noticeably longer to run")
    config.addinivalue_line("markers", "performance: Tests with realistic data volumes")
