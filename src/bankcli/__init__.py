"""
bankcli - Local Persistence and Query Layer for a Banking CLI

JSON-file-backed stores for a personal-finance command-line client, plus the
filter evaluation used to query cached transactions.

Key Features:
- User settings with a typed setting registry (config.json)
- Merchant to category overrides with import/export (merchant_map.json)
- Named, reusable transaction queries (queries.json)
- Time-stamped account and transaction cache (cache.json)
- Atomic, owner-only file writes and recovery from corrupted files

Domain Packages:
- core: Configuration, errors, JSON I/O, dates and money
- settings: Config store and setting registry
- merchants: Merchant mapping store and import/export
- queries: Saved query store
- cache: Account and transaction cache
- transactions: Filter model, filter evaluation and spending analysis
- cli: Command-line interface (bank)

Example Usage:
    from pathlib import Path

    from bankcli import Stores, TransactionFilter

    stores = Stores(Path.home() / ".bankcli")
    stores.queries.save("groceries", TransactionFilter(merchant="Countdown,Pak N Save"))
"""

__version__ = "0.3.0"
__author__ = "bankcli contributors"

from .core.config import Config, Environment, load_config
from .core.errors import BankCliError, DuplicateError, StoreWriteError, ValidationError
from .stores import Stores
from .transactions.filters import filter_transactions, matches
from .transactions.models import TransactionFilter

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "load_config",
    # Errors
    "BankCliError",
    "DuplicateError",
    "StoreWriteError",
    "ValidationError",
    # Stores
    "Stores",
    # Filtering
    "TransactionFilter",
    "filter_transactions",
    "matches",
]
