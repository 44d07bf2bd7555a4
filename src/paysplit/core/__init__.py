"""Assignment engine: option generation, search, and usage accounting."""

from paysplit.core.comparator import (
    calculate_total_cost,
    calculate_total_points_usage,
    compare_combinations,
)
from paysplit.core.entities import (
    COMBO_METHOD,
    POINTS_METHOD,
    Assignment,
    Candidate,
    Order,
    PaymentMethod,
    build_payment_method_map,
    find_order_by_id,
)
from paysplit.core.enumerator import generate_combinations, iter_candidates
from paysplit.core.feasibility import CombinationEvaluation, evaluate_combination
from paysplit.core.money import discounted_cost, round_half_up
from paysplit.core.options import generate_options
from paysplit.core.selector import find_optimal_assignments
from paysplit.core.usage import Usage, UsageLedger

__all__ = [
    "COMBO_METHOD",
    "POINTS_METHOD",
    "Assignment",
    "Candidate",
    "CombinationEvaluation",
    "Order",
    "PaymentMethod",
    "Usage",
    "UsageLedger",
    "build_payment_method_map",
    "calculate_total_cost",
    "calculate_total_points_usage",
    "compare_combinations",
    "discounted_cost",
    "evaluate_combination",
    "find_optimal_assignments",
    "find_order_by_id",
    "generate_combinations",
    "generate_options",
    "iter_candidates",
    "round_half_up",
]
