"""
Test Fixtures and Utilities

Shared test data and helpers.

This module provides:
- Synthetic accounts, transactions and merchant maps
- A cache.json writer for seeding a test directory
- Subprocess helpers for E2E tests

All test data is synthetic and does not contain real financial information.
"""
