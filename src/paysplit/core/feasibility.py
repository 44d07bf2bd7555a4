"""Replay of a candidate against the shared payment method limits."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

from paysplit.core.entities import POINTS_METHOD, ZERO, Assignment, PaymentMethod


@dataclass(frozen=True, slots=True)
class CombinationEvaluation:
    """Outcome of replaying one candidate against the method limits."""

    valid: bool
    total_cost: Decimal


def evaluate_combination(
    combination: Sequence[Assignment],
    payment_methods: Mapping[str, PaymentMethod],
) -> CombinationEvaluation:
    """Check that a candidate stays within every method's limit.

    Limits are seeded fresh from ``payment_methods`` on each call. Assignments
    are replayed in order; the points portion draws from the points pool and
    the card portion from the named method. Limit checks stop at the first
    assignment that does not fit.

    Args:
        combination: Candidate to check
        payment_methods: Payment methods by id

    Returns:
        CombinationEvaluation with validity and the cost of every assignment
        in the candidate, whether or not it is valid.
    """
    remaining: dict[str, Decimal] = {
        method_id: method.limit for method_id, method in payment_methods.items()
    }

    total_cost = sum((assignment.cost for assignment in combination), ZERO)
    valid = True

    for assignment in combination:
        points_left = remaining.get(POINTS_METHOD, ZERO)
        card_left = remaining.get(assignment.payment_method, ZERO)

        if assignment.points_used > points_left or assignment.card_used > card_left:
            valid = False
            break

        remaining[POINTS_METHOD] = points_left - assignment.points_used
        # A points-only assignment draws from the pool exactly once
        if assignment.payment_method != POINTS_METHOD:
            remaining[assignment.payment_method] = card_left - assignment.card_used

    return CombinationEvaluation(valid=valid, total_cost=total_cost)
