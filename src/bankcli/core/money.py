#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Transaction records carry signed decimal dollar amounts (e.g. -45.99); converting
them to cents before comparing or summing prevents floating-point errors such as
an amount of 50.00 failing an inclusive ``maxAmount`` of 50.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def dollars_to_cents(value: Any) -> int:
    """
    Convert a dollar amount (int, float, Decimal or string like "$1,234.56") to cents.

    Rounds half away from zero at the cent.

    Raises:
        ValueError: If the value is not a number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
    try:
        # str() keeps floats like 0.1 from expanding to their binary value
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Supports both positive (income/inflows) and negative (spending/outflows) amounts.

    Examples:
        >>> spend = Money.from_dollars(-45.99)
        >>> str(spend)
        '$-45.99'
        >>> spend.abs().to_cents()
        4599
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: Any) -> "Money":
        """
        Create Money from a dollar amount.

        Args:
            dollars: int, float, Decimal or string like "$12.34"

        Returns:
            Money object
        """
        return cls(cents=dollars_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> float:
        """Get value as a float dollar amount, for JSON output."""
        return self.cents / 100

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        return Money(cents=self.cents - other.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
