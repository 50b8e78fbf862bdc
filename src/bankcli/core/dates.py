#!/usr/bin/env python3
"""
FinancialDate Primitive Type and Date Helpers

Immutable date wrapper with consistent formatting for financial operations,
plus the timestamp helpers used by the stores and the date-expression parser
used by the command line (``--since 7d``, ``--until endoflastmonth``).
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any

from .errors import ValidationError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DAYS_RE = re.compile(r"^(\d+)\s*d(?:ays?)?$")
_WEEKS_RE = re.compile(r"^(\d+)\s*w(?:eeks?)?$")
_MONTHS_RE = re.compile(r"^(\d+)\s*m(?:onths?)?$")

DATE_SHORTCUT_HELP = (
    'Expected YYYY-MM-DD or shortcuts like "today", "yesterday", "7d", "2w", "3m", '
    '"thismonth", "lastmonth", "endoflastmonth".'
)


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_value(cls, value: Any) -> "FinancialDate | None":
        """
        Coerce a record field into a calendar date, ignoring time of day.

        Accepts date and datetime objects and ISO-8601 strings with or without a
        time component ("2024-01-15", "2024-01-15T10:30:00Z").

        Returns:
            FinancialDate, or None if the value cannot be interpreted as a date
        """
        if isinstance(value, datetime):
            return cls(date=value.date())
        if isinstance(value, date):
            return cls(date=value)
        if not isinstance(value, str) or len(value) < 10:
            return None
        try:
            return cls(date=date.fromisoformat(value[:10]))
        except ValueError:
            return None

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        return self.date >= other.date


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse an ISO-8601 timestamp written by ``utc_now_iso`` (or any ISO variant).

    Naive timestamps are assumed to be UTC. Returns None for missing or
    malformed values.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_ago(days: int, today: date | None = None) -> date:
    """Date N days before today."""
    return (today or date.today()) - timedelta(days=days)


def months_ago(months: int, today: date | None = None) -> date:
    """
    Date N months before today, clamping the day to the target month's length.

    Example: 31 March minus one month is 28 (or 29) February.
    """
    today = today or date.today()
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _parse_shortcut(text: str, today: date) -> date | None:
    normalized = text.lower().strip()

    if normalized == "today":
        return today
    if normalized == "yesterday":
        return days_ago(1, today)
    if normalized == "thismonth":
        return today.replace(day=1)
    if normalized == "lastmonth":
        return months_ago(1, today.replace(day=1))
    if normalized == "endoflastmonth":
        return today.replace(day=1) - timedelta(days=1)

    # Caps keep each shortcut within roughly a century
    match = _DAYS_RE.match(normalized)
    if match and int(match.group(1)) <= 36500:
        return days_ago(int(match.group(1)), today)

    match = _WEEKS_RE.match(normalized)
    if match and int(match.group(1)) <= 5200:
        return days_ago(int(match.group(1)) * 7, today)

    match = _MONTHS_RE.match(normalized)
    if match and int(match.group(1)) <= 1200:
        return months_ago(int(match.group(1)), today)

    return None


def parse_date_expression(text: str, field_name: str, today: date | None = None) -> date:
    """
    Parse a command-line date value.

    Args:
        text: "YYYY-MM-DD" or a shortcut (today, yesterday, 7d, 2w, 3m,
              thismonth, lastmonth, endoflastmonth)
        field_name: Option name used in error messages (e.g. "since")
        today: Reference date (default: today)

    Returns:
        The parsed calendar date

    Raises:
        ValidationError: If the value is not a recognised shortcut or a real date
    """
    today = today or date.today()
    shortcut = _parse_shortcut(text, today)
    if shortcut is not None:
        return shortcut

    if not _ISO_DATE_RE.match(text):
        raise ValidationError(f'Invalid date format for --{field_name}: "{text}". {DATE_SHORTCUT_HELP}')

    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValidationError(
            f'Invalid date for --{field_name}: "{text}". Please provide a valid date.'
        ) from None


def validate_date_range(start: date, end: date, start_label: str = "since", end_label: str = "until") -> None:
    """
    Ensure start <= end.

    Raises:
        ValidationError: If start is after end
    """
    if start > end:
        raise ValidationError(
            f"Invalid date range: --{start_label} ({start.isoformat()}) is after "
            f"--{end_label} ({end.isoformat()})."
        )
