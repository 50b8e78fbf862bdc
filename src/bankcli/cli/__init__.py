"""
Command Line Interface Package

The ``bank`` command.

Command Structure:
- bank version / bank config: Utility commands
- bank settings: Settings and merchant category mappings
- bank query: Saved transaction queries
- bank cache: Local account and transaction cache
- bank transactions: Filter and summarise cached transactions
"""
