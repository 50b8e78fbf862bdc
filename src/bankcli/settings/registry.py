#!/usr/bin/env python3
"""
Setting Registry

Declares every recognised user setting with its type, allowed values, default
and description, and converts raw command-line strings into typed values.
The config store itself knows nothing about which keys are valid; validation
happens here, at the command boundary, so error messages can quote the input.
"""

from dataclasses import dataclass
from typing import Any, Literal

from ..core.errors import ValidationError

OUTPUT_FORMATS = ("json", "csv", "table", "list", "ndjson")
DEFAULT_FORMAT = "json"
DEFAULT_CACHE_ENABLED = False

# Values shorter than this are masked entirely
MASK_MIN_LENGTH_FOR_PARTIAL = 9

SettingType = Literal["string", "boolean", "number", "array"]

# Value stored in config.json; unknown keys keep whatever JSON value they had
SettingValue = str | bool | int | float | list[str]

_TRUE_VALUES = ("true", "1", "yes", "y")
_FALSE_VALUES = ("false", "0", "no", "n")


@dataclass(frozen=True)
class SettingDefinition:
    """A recognised setting."""

    description: str
    type: SettingType
    options: tuple[str, ...] | None = None
    default: Any = None
    sensitive: bool = False
    minimum: float | None = None


VALID_SETTINGS: dict[str, SettingDefinition] = {
    "appToken": SettingDefinition(
        description="App token for API authentication",
        type="string",
        sensitive=True,
    ),
    "userToken": SettingDefinition(
        description="User token for API authentication",
        type="string",
        sensitive=True,
    ),
    "format": SettingDefinition(
        description="Default output format (json, csv, table, list, ndjson)",
        type="string",
        options=OUTPUT_FORMATS,
        default=DEFAULT_FORMAT,
    ),
    "cacheData": SettingDefinition(
        description="Whether to cache API responses locally",
        type="boolean",
        default=DEFAULT_CACHE_ENABLED,
    ),
    "transferAllowlist": SettingDefinition(
        description="Comma-separated list of allowed destination account numbers for transfers",
        type="array",
        default=[],
    ),
    "transferMaxAmount": SettingDefinition(
        description="Maximum transfer amount (safety limit)",
        type="number",
        default=50000,
        minimum=0,
    ),
}

SENSITIVE_SETTINGS = frozenset(key for key, setting in VALID_SETTINGS.items() if setting.sensitive)


def is_known_setting(key: str) -> bool:
    """Check whether a key is declared in the registry."""
    return key in VALID_SETTINGS


def get_setting_default(key: str) -> Any:
    """Default value for a setting, or None for unknown keys and settings without one."""
    setting = VALID_SETTINGS.get(key)
    if setting is None:
        return None
    # Copy list defaults so callers cannot mutate the registry
    return list(setting.default) if isinstance(setting.default, list) else setting.default


def parse_setting_value(key: str, raw: str) -> SettingValue:
    """
    Convert a raw string into the typed value for a setting.

    Args:
        key: Registered setting key
        raw: Value as typed by the user

    Returns:
        Typed value ready to store

    Raises:
        ValidationError: If the key is unknown or the value does not fit its type
    """
    setting = VALID_SETTINGS.get(key)
    if setting is None:
        raise ValidationError(f"Unknown setting '{key}'. Valid settings: {', '.join(VALID_SETTINGS)}")

    if setting.type == "boolean":
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValidationError(f"Invalid boolean value for '{key}'. Use true/false, yes/no, or 1/0.")

    if setting.type == "number":
        try:
            number = float(raw)
        except ValueError:
            raise ValidationError(f"Invalid number value for '{key}'. Please enter a valid number.") from None
        if number != number or number in (float("inf"), float("-inf")):
            raise ValidationError(f"Invalid number value for '{key}'. Please enter a finite number.")
        if setting.minimum is not None and number < setting.minimum:
            raise ValidationError(f"Invalid value for '{key}'. Value must be at least {setting.minimum:g}.")
        return int(number) if number.is_integer() else number

    if setting.type == "array":
        return [item.strip() for item in raw.split(",") if item.strip()]

    if setting.options and raw not in setting.options:
        raise ValidationError(f"Invalid value for '{key}'. Valid options are: {', '.join(setting.options)}")

    return raw


def mask_sensitive_value(value: str) -> str:
    """
    Mask a secret for display.

    Shows the first and last four characters of values of nine or more
    characters and masks shorter values entirely.

    Examples:
        mask_sensitive_value("abcdefghi") -> "abcd*fghi"
        mask_sensitive_value("short") -> "*****"
    """
    if len(value) < MASK_MIN_LENGTH_FOR_PARTIAL:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"


def format_setting_value(key: str, value: Any) -> str:
    """Render a stored value for display, masking sensitive settings."""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if key in SENSITIVE_SETTINGS and isinstance(value, str):
        return mask_sensitive_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
