"""Per-method usage totals for the winning candidate."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from paysplit.core.entities import (
    COMBO_METHOD,
    POINTS_METHOD,
    ZERO,
    Assignment,
    PaymentMethod,
)
from paysplit.core.money import round_half_up
from paysplit.errors import PaymentMethodNotFoundError


class Usage:
    """Running amount charged to one payment method."""

    def __init__(self) -> None:
        self._amount = ZERO

    def add(self, value: Decimal) -> None:
        self._amount += value

    @property
    def amount(self) -> Decimal:
        """Accumulated amount rounded half-up to cents."""
        return round_half_up(self._amount)


class UsageLedger:
    """Usage for every known payment method, in display order."""

    def __init__(self, payment_methods: Sequence[PaymentMethod]) -> None:
        self._usage: dict[str, Usage] = {
            method.id: Usage() for method in payment_methods
        }
        self._display_order = _display_order(method.id for method in payment_methods)

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._usage

    def __len__(self) -> int:
        return len(self._usage)

    def get(self, method_id: str) -> Usage:
        """Return usage for a method.

        Raises:
            PaymentMethodNotFoundError: If the method was not loaded.
        """
        usage = self._usage.get(method_id)
        if usage is None:
            raise PaymentMethodNotFoundError(method_id)
        return usage

    def record(self, assignment: Assignment) -> None:
        """Add an assignment's points and card portions to their methods."""
        if assignment.points_used > ZERO:
            self.get(POINTS_METHOD).add(assignment.points_used)
        if assignment.card_used > ZERO:
            self.get(assignment.payment_method).add(assignment.card_used)

    def record_all(self, assignments: Iterable[Assignment]) -> None:
        for assignment in assignments:
            self.record(assignment)

    def summary(self) -> list[tuple[str, Decimal]]:
        """Non-zero usage as (method id, amount) pairs in display order.

        The combo card comes first, then other cards in load order, then
        the points pool.
        """
        rows: list[tuple[str, Decimal]] = []
        for method_id in self._display_order:
            amount = self._usage[method_id].amount
            if amount > ZERO:
                rows.append((method_id, amount))
        return rows

    def total(self) -> Decimal:
        return sum((usage.amount for usage in self._usage.values()), ZERO)


def _display_order(method_ids: Iterable[str]) -> list[str]:
    ids = list(method_ids)
    cards = [i for i in ids if i not in (COMBO_METHOD, POINTS_METHOD)]
    head = [COMBO_METHOD] if COMBO_METHOD in ids else []
    tail = [POINTS_METHOD] if POINTS_METHOD in ids else []
    return head + cards + tail
