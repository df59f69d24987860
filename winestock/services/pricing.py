"""
Price Conversion
================

Prices are stored as integer cents and presented as decimal reais.
Conversion goes through Decimal and rounds half-up to the nearest cent, so
59.9 becomes 5990 and never 5989.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from .exceptions import ValidationError

CENTS_PER_UNIT = Decimal(100)

def to_cents(value: Union[Decimal, float, int, str]) -> int:
    """Major units (reais) to integer minor units (cents)"""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid price: {value!r}", field='price')
    if amount < 0:
        raise ValidationError("Price must be non-negative", field='price')
    return int((amount * CENTS_PER_UNIT).quantize(Decimal('1'), rounding=ROUND_HALF_UP))

def from_cents(cents: int) -> Decimal:
    """Integer cents back to decimal reais"""
    return Decimal(cents) / CENTS_PER_UNIT
