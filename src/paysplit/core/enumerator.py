"""Backtracking enumeration of complete payment candidates."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal

from paysplit.core.entities import ZERO, Assignment, Candidate, Order, PaymentMethod
from paysplit.core.options import generate_options


def iter_candidates(
    orders: Sequence[Order],
    payment_methods: Mapping[str, PaymentMethod],
) -> Iterator[Candidate]:
    """Yield every complete candidate, one assignment per order.

    Candidates are produced lazily in depth-first order, following the
    option order of ``generate_options`` at each level. An order with no
    admissible option ends its branch without yielding anything.
    """
    current: list[Assignment] = []
    yield from _extend(orders, payment_methods, 0, current, ZERO)


def generate_combinations(
    orders: Sequence[Order],
    payment_methods: Mapping[str, PaymentMethod],
) -> list[Candidate]:
    """Materialize all candidates; meant for small batches and inspection."""
    return list(iter_candidates(orders, payment_methods))


def _extend(
    orders: Sequence[Order],
    payment_methods: Mapping[str, PaymentMethod],
    index: int,
    current: list[Assignment],
    used_points: Decimal,
) -> Iterator[Candidate]:
    if index == len(orders):
        yield tuple(current)
        return

    for option in generate_options(orders[index], payment_methods, used_points):
        current.append(option)
        yield from _extend(
            orders,
            payment_methods,
            index + 1,
            current,
            used_points + option.points_used,
        )
        current.pop()
