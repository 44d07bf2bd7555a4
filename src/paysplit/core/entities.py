"""Domain entities shared by option generation, search, and reporting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from paysplit.errors import OrderNotFoundError

# Reserved id of the loyalty-points pool
POINTS_METHOD = "PUNKTY"
# Card eligible for the points + card split
COMBO_METHOD = "mZysk"
COMBO_DISCOUNT = 10
MIN_POINTS_USAGE = Decimal("15.00")

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class Order:
    """Order to be paid; promotions is None when the order lists none."""

    id: str
    value: Decimal
    promotions: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    """Payment method with a percentage discount and a batch-wide limit."""

    id: str
    discount: int
    limit: Decimal


@dataclass(frozen=True, slots=True)
class Assignment:
    """How a single order is paid.

    ``cost`` is always ``points_used + card_used``. For a points-only payment
    ``payment_method`` is the points pool and ``card_used`` is zero.
    """

    order_id: str
    payment_method: str
    points_used: Decimal
    card_used: Decimal
    cost: Decimal


# One assignment per order, in order-input order
Candidate = tuple[Assignment, ...]


def build_payment_method_map(
    payment_methods: Sequence[PaymentMethod],
) -> dict[str, PaymentMethod]:
    """Index payment methods by id."""
    return {method.id: method for method in payment_methods}


def find_order_by_id(orders: Sequence[Order], order_id: str) -> Order:
    """Return the order with the given id.

    Raises:
        OrderNotFoundError: If no order has that id.
    """
    for order in orders:
        if order.id == order_id:
            return order
    raise OrderNotFoundError(order_id)
