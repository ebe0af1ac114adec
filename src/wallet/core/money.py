#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass

from .currency import cents_to_dollars_str, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Negative values are representable so that unguarded operations (a negative
    deposit, for instance) behave arithmetically instead of raising.

    Examples:
        >>> balance = Money.from_dollars(100)
        >>> str(balance)
        '$100.00'

        >>> fee = Money.parse("12.5")
        >>> fee.to_cents()
        1250

        >>> str(balance - fee)
        '$87.50'
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object

        Raises:
            InvalidAmountError: If a string argument cannot be parsed
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse user-entered text; raises InvalidAmountError on bad input."""
        return cls(cents=parse_dollars_to_cents(text))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def is_positive(self) -> bool:
        """True if strictly greater than zero."""
        return self.cents > 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
