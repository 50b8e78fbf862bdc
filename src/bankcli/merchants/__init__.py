"""
Merchant Mappings Package

User-defined merchant → category overrides and their import/export helpers.
"""

from .store import MERCHANT_MAP_FILE_NAME, MerchantCategory, MerchantMappingStore, normalise_merchant_name
from .transfer import MergeResult, export_mappings, merge_mappings, validate_merchant_map_structure

__all__ = [
    "MERCHANT_MAP_FILE_NAME",
    "MerchantCategory",
    "MerchantMappingStore",
    "MergeResult",
    "export_mappings",
    "merge_mappings",
    "normalise_merchant_name",
    "validate_merchant_map_structure",
]
