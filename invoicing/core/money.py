# invoicing/core/money.py
"""
Integer-cents money helpers.

Only integer cents are stored or summed. Rounding is half away from zero and is
applied to the decimal text of the inputs, so 2.675 dollars becomes 268 cents
rather than whatever the nearest binary float happens to give.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

_ONE = Decimal("1")
_HUNDRED = Decimal("100")

# Largest amount a signed 64-bit INTEGER column holds
MAX_CENTS = 2**63 - 1


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(amount: Number) -> int:
    return int(_as_decimal(amount).quantize(_ONE, rounding=ROUND_HALF_UP))


def fits_cents(amount: Number) -> bool:
    """True when amount lies within what the store can hold as integer cents."""
    return abs(_as_decimal(amount)) <= MAX_CENTS


def to_cents(price: Number) -> int:
    """Convert a price in major units (12.5 == $12.50) to integer cents."""
    return round_cents(_as_decimal(price) * _HUNDRED)


def line_total_cents(qty: Number, unit_price_cents: int) -> int:
    """round(qty * unit_price_cents) for one invoice item."""
    return round_cents(_as_decimal(qty) * Decimal(int(unit_price_cents)))


def format_money(cents: int) -> str:
    # 2749 -> "$27.49"
    return f"${Decimal(int(cents)) / _HUNDRED:.2f}"
