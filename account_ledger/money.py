"""
Money Helpers Module

Decimal parsing, rounding and formatting for the ledger's single
two-decimal-place unit. NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Union

# Set global decimal context for financial precision
getcontext().prec = 28

CENT = Decimal('0.01')
MAX_BALANCE = Decimal('999999.99')  # Upper bound for any balance or amount

Numeric = Union[Decimal, int, str]


def round2(value: Numeric) -> Decimal:
    """
    Round to two decimal places using half-up rounding

    Args:
        value: Decimal (or int/str convertible to Decimal)

    Returns:
        Decimal quantized to 0.01
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Numeric) -> str:
    """Format for display with exactly two fractional digits"""
    return f"{round2(value):.2f}"


def parse_amount(text: str) -> Decimal:
    """
    Parse user-entered text into a Decimal amount

    Args:
        text: Raw text, surrounding whitespace is ignored

    Returns:
        Decimal value (not rounded)

    Raises:
        ValueError: If text is empty, not a number, or not finite
    """
    if text is None or not isinstance(text, str) or not text.strip():
        raise ValueError("Amount must be a non-empty string")

    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{text}' to Decimal")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got '{text}'")

    return amount
