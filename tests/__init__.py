"""
Test Suite for bankcli

Test Structure:
- fixtures/: Shared synthetic data and subprocess helpers
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI commands run in-process against a temporary directory
- e2e/: The bank command run in a subprocess
- performance/: Realistic data volumes

Test Data:
All test data uses synthetic financial information to protect privacy.
Real account data is never included in tests.
"""
