"""
Core Utilities Package

Shared building blocks used by every store and command.

This package provides:
- Environment configuration and logging setup
- Atomic, owner-only JSON document I/O
- The JSON document store base class
- Date and money primitives
- The error hierarchy
"""

from .config import CONFIG_DIR_NAME, Config, Environment, load_config
from .dates import FinancialDate, parse_date_expression, parse_timestamp, utc_now_iso, validate_date_range
from .datastore_mixin import JsonDocumentStore
from .errors import BankCliError, DuplicateError, StoreWriteError, ValidationError
from .json_utils import SECURE_FILE_MODE, ensure_directory, format_json, read_json, write_json
from .money import Money

__all__ = [
    # Configuration
    "CONFIG_DIR_NAME",
    "Config",
    "Environment",
    "load_config",
    # Errors
    "BankCliError",
    "DuplicateError",
    "StoreWriteError",
    "ValidationError",
    # Persistence
    "JsonDocumentStore",
    "SECURE_FILE_MODE",
    "ensure_directory",
    "format_json",
    "read_json",
    "write_json",
    # Primitives
    "FinancialDate",
    "Money",
    "parse_date_expression",
    "parse_timestamp",
    "utc_now_iso",
    "validate_date_range",
]
