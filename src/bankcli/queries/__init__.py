"""
Saved Queries Package

Named transaction filters that can be listed and re-run.
"""

from .models import SavedQuery
from .store import MAX_QUERY_NAME_LENGTH, QUERIES_FILE_NAME, QueryNameValidation, QueryStore, validate_query_name

__all__ = [
    "MAX_QUERY_NAME_LENGTH",
    "QUERIES_FILE_NAME",
    "QueryNameValidation",
    "QueryStore",
    "SavedQuery",
    "validate_query_name",
]
