"""Top-level selection of the best feasible candidate."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

from paysplit.core.comparator import compare_combinations
from paysplit.core.entities import Candidate, Order, PaymentMethod
from paysplit.core.enumerator import iter_candidates
from paysplit.core.feasibility import evaluate_combination
from paysplit.core.logger import OptimizerLogger
from paysplit.errors import BatchTooLargeError


def find_optimal_assignments(
    orders: Sequence[Order],
    payment_methods: Mapping[str, PaymentMethod],
    *,
    max_orders: int | None = None,
    optimizer_logger: OptimizerLogger | None = None,
) -> Candidate:
    """Pick the preferred feasible candidate for the batch.

    Candidates are streamed from the enumerator, filtered by the limit
    replay, and folded with ``compare_combinations``. The first feasible
    candidate seeds the fold and is only replaced by a strictly preferred
    one, so among equally good candidates the first enumerated wins.

    Args:
        orders: Orders in input order
        payment_methods: Payment methods by id
        max_orders: Optional cap on batch size
        optimizer_logger: Logger for search progress

    Returns:
        The winning candidate, or an empty tuple when none fits the limits.

    Raises:
        BatchTooLargeError: If ``max_orders`` is set and exceeded.
    """
    log = optimizer_logger or OptimizerLogger()

    if max_orders is not None and len(orders) > max_orders:
        msg = f"Batch has {len(orders)} orders; at most {max_orders} are allowed"
        raise BatchTooLargeError(msg)

    log.search_start(len(orders), len(payment_methods))

    best: Candidate = ()
    best_cost: Decimal | None = None
    candidate_count = 0
    valid_count = 0

    for candidate in iter_candidates(orders, payment_methods):
        candidate_count += 1
        evaluation = evaluate_combination(candidate, payment_methods)
        if not evaluation.valid:
            continue
        valid_count += 1

        if valid_count == 1 or compare_combinations(
            candidate, best, payment_methods
        ) < 0:
            best = candidate
            best_cost = evaluation.total_cost
            log.best_replaced(candidate_count, evaluation.total_cost)

    log.search_complete(candidate_count, valid_count, best_cost)
    if valid_count == 0:
        log.no_feasible_assignment(len(orders))

    return best
