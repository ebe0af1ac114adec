#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All balances are held as integer cents to avoid floating-point errors.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Display uses dollar strings: "$12.34"
- User input is free text: "12", "12.5", "$1,234.56"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse user text with Decimal, then convert to integer cents
- Reject unparseable input instead of guessing
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import InvalidAmountError

_CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

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


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a user-entered dollar string to cents.

    Fractions of a cent are rounded half-up.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        InvalidAmountError: If the text is empty, not a finite number, or too
            large to represent in cents

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents("-5") -> -500
    """
    clean = str(dollars_str).replace("$", "").replace(",", "").strip()
    if not clean:
        raise InvalidAmountError(dollars_str)

    try:
        amount = Decimal(clean)
        if not amount.is_finite():
            raise InvalidAmountError(dollars_str)
        # Amounts too large for the decimal context fail here rather than overflow.
        cents = amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100
    except InvalidOperation as e:
        raise InvalidAmountError(dollars_str) from e

    return int(cents.to_integral_value())


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"


def is_valid_currency_string(currency_str: str) -> bool:
    """Check if a string represents a valid currency amount."""
    try:
        parse_dollars_to_cents(currency_str)
        return True
    except InvalidAmountError:
        return False
