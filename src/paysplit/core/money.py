"""Currency arithmetic on Decimal amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
_HUNDRED = Decimal(100)


def round_half_up(amount: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def discounted_cost(value: Decimal, discount: int) -> Decimal:
    """Apply a percentage discount and round to cents.

    The sign of ``value`` is preserved, so -100.00 at 10% gives -90.00.
    """
    return round_half_up(value * (_HUNDRED - discount) / _HUNDRED)
