"""
Settings Package

User settings persisted in config.json and the registry describing which
settings exist.
"""

from .registry import (
    DEFAULT_CACHE_ENABLED,
    DEFAULT_FORMAT,
    OUTPUT_FORMATS,
    SENSITIVE_SETTINGS,
    VALID_SETTINGS,
    SettingDefinition,
    SettingValue,
    format_setting_value,
    get_setting_default,
    is_known_setting,
    mask_sensitive_value,
    parse_setting_value,
)
from .store import CONFIG_FILE_NAME, ConfigStore

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigStore",
    "DEFAULT_CACHE_ENABLED",
    "DEFAULT_FORMAT",
    "OUTPUT_FORMATS",
    "SENSITIVE_SETTINGS",
    "SettingDefinition",
    "SettingValue",
    "VALID_SETTINGS",
    "format_setting_value",
    "get_setting_default",
    "is_known_setting",
    "mask_sensitive_value",
    "parse_setting_value",
]
