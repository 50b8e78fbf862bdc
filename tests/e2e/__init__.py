#!/usr/bin/env python3
"""
End-to-end tests for the bank command.

These tests execute actual CLI commands via subprocess to validate complete
workflows from the user's perspective. They use synthetic test data in a
temporary directory and never touch the real ~/.bankcli.
"""
