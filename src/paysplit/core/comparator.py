"""Preference order between two complete candidates."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

from paysplit.core.entities import POINTS_METHOD, ZERO, Assignment, PaymentMethod
from paysplit.errors import PaymentMethodNotFoundError


def calculate_total_points_usage(assignments: Sequence[Assignment]) -> Decimal:
    return sum((a.points_used for a in assignments), ZERO)


def calculate_total_cost(assignments: Sequence[Assignment]) -> Decimal:
    return sum((a.cost for a in assignments), ZERO)


def compare_combinations(
    a: Sequence[Assignment],
    b: Sequence[Assignment],
    payment_methods: Mapping[str, PaymentMethod],
) -> int:
    """Compare two candidates; negative means ``a`` is preferred.

    A candidate whose total points usage fits the raw points limit always
    beats one that does not. Otherwise the lower total cost wins, and equal
    costs compare as 0.

    Raises:
        PaymentMethodNotFoundError: If the points pool is not configured.
    """
    points_method = payment_methods.get(POINTS_METHOD)
    if points_method is None:
        raise PaymentMethodNotFoundError(POINTS_METHOD)

    a_points_ok = calculate_total_points_usage(a) <= points_method.limit
    b_points_ok = calculate_total_points_usage(b) <= points_method.limit

    if a_points_ok and not b_points_ok:
        return -1
    if b_points_ok and not a_points_ok:
        return 1

    a_cost = calculate_total_cost(a)
    b_cost = calculate_total_cost(b)
    if a_cost < b_cost:
        return -1
    if a_cost > b_cost:
        return 1
    return 0
