"""Fixed-point helpers for monetary amounts.

Amounts are persisted as floats (two decimal places) but all arithmetic goes
through ``Decimal`` so totals never pick up binary rounding noise.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

CENT = Decimal("0.01")


def as_decimal(value) -> Decimal:
    """Convert a float, int, str or Decimal amount to a two-place Decimal."""
    try:
        return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise ValidationError({"amount": [f"Invalid monetary amount: {value!r}"]}) from None


def to_amount(value) -> float:
    """Normalize an amount to the two-place float stored on aggregates."""
    return float(as_decimal(value))


def line_total(price, quantity: int) -> Decimal:
    return as_decimal(price) * quantity


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, Decimal("0.00")).quantize(CENT, rounding=ROUND_HALF_UP)
