"""Admissible payment options for a single order."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from paysplit.core.entities import (
    COMBO_DISCOUNT,
    COMBO_METHOD,
    MIN_POINTS_USAGE,
    POINTS_METHOD,
    ZERO,
    Assignment,
    Order,
    PaymentMethod,
)
from paysplit.core.money import discounted_cost, round_half_up
from paysplit.errors import PaymentMethodNotFoundError


def generate_options(
    order: Order,
    payment_methods: Mapping[str, PaymentMethod],
    used_points: Decimal = ZERO,
) -> list[Assignment]:
    """List every admissible way to pay ``order``.

    Options come out in a fixed order: points only, then one per known
    promotion in the order's promotion list, then the points + combo card
    split (offered only to orders without a promotion list).

    Args:
        order: Order to pay
        payment_methods: Payment methods by id; must contain the points pool
        used_points: Points already committed by earlier orders in the
            candidate being built

    Returns:
        Assignments for ``order``; empty when nothing is admissible.

    Raises:
        PaymentMethodNotFoundError: If the points pool is not configured.
    """
    points_method = payment_methods.get(POINTS_METHOD)
    if points_method is None:
        raise PaymentMethodNotFoundError(POINTS_METHOD)

    options: list[Assignment] = []

    points_option = _points_only(order, points_method, used_points)
    if points_option is not None:
        options.append(points_option)

    options.extend(_promotion_cards(order, payment_methods))

    combo_method = payment_methods.get(COMBO_METHOD)
    if combo_method is not None:
        combo_option = _points_and_combo(
            order, points_method, combo_method, used_points
        )
        if combo_option is not None:
            options.append(combo_option)

    return options


def _points_only(
    order: Order,
    points_method: PaymentMethod,
    used_points: Decimal,
) -> Assignment | None:
    remaining_points = points_method.limit - used_points
    if remaining_points < order.value:
        return None

    cost = discounted_cost(order.value, points_method.discount)
    return Assignment(
        order_id=order.id,
        payment_method=POINTS_METHOD,
        points_used=cost,
        card_used=ZERO,
        cost=cost,
    )


def _promotion_cards(
    order: Order,
    payment_methods: Mapping[str, PaymentMethod],
) -> list[Assignment]:
    if not order.promotions:
        return []

    options: list[Assignment] = []
    for promotion in order.promotions:
        method = payment_methods.get(promotion)
        # Checked against the full limit; feasibility tracks what is left
        if method is None or method.limit < order.value:
            continue

        cost = discounted_cost(order.value, method.discount)
        options.append(
            Assignment(
                order_id=order.id,
                payment_method=method.id,
                points_used=ZERO,
                card_used=cost,
                cost=cost,
            )
        )
    return options


def _points_and_combo(
    order: Order,
    points_method: PaymentMethod,
    combo_method: PaymentMethod,
    used_points: Decimal,
) -> Assignment | None:
    if order.promotions is not None:
        return None

    remaining_points = points_method.limit - used_points
    target_cost = discounted_cost(order.value, COMBO_DISCOUNT)

    if used_points == ZERO:
        points_to_use = MIN_POINTS_USAGE
    else:
        points_to_use = min(remaining_points, target_cost)

    if points_to_use <= ZERO or points_to_use > remaining_points:
        return None

    card_to_use = target_cost - points_to_use
    if card_to_use < ZERO:
        return None

    # Card share expressed before the combo discount
    required_card_value = round_half_up(
        card_to_use * 100 / Decimal(100 - COMBO_DISCOUNT)
    )
    if combo_method.limit < required_card_value:
        return None

    return Assignment(
        order_id=order.id,
        payment_method=combo_method.id,
        points_used=points_to_use,
        card_used=card_to_use,
        cost=target_cost,
    )
