#!/usr/bin/env python3
"""
Error Types for bankcli

Exception hierarchy shared by the stores and the command layer.

- ValidationError: input rejected before any state change
- DuplicateError: a named entity already exists
- StoreWriteError: a store could not persist its document

Absence (unknown query, unset setting) is never an exception; stores
return None or False and let callers decide.
"""


class BankCliError(Exception):
    """Base class for all bankcli errors."""


class ValidationError(BankCliError, ValueError):
    """Raised when user-supplied input fails validation."""


class DuplicateError(BankCliError):
    """Raised when creating an entity whose name is already taken."""


class StoreWriteError(BankCliError, OSError):
    """Raised when a store fails to write its backing file."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save {path}: {reason}")
