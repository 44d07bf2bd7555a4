"""Plain-text report of the chosen assignments and method usage."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from paysplit.core.entities import (
    POINTS_METHOD,
    ZERO,
    Assignment,
    Order,
    find_order_by_id,
)
from paysplit.core.usage import UsageLedger

NO_ASSIGNMENTS_MESSAGE = "No optimal assignments found."


class ResultReporter:
    """Writes the optimization report to a Rich console.

    Markup, highlighting, and wrapping are disabled so lines come out exactly
    as built, which keeps the report easy to diff and parse.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(
            highlight=False, soft_wrap=True, emoji=False
        )

    def _line(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    def loaded(self, order_count: int, method_count: int) -> None:
        self._line(f"Loaded orders: {order_count}")
        self._line(f"Loaded payment methods: {method_count}")

    def process_results(
        self,
        orders: Sequence[Order],
        assignments: Sequence[Assignment],
        ledger: UsageLedger,
    ) -> None:
        """Render each assignment, record it in the ledger, then summarize.

        Raises:
            OrderNotFoundError: If an assignment names an unknown order.
            PaymentMethodNotFoundError: If an assignment names a method the
                ledger does not track.
        """
        if not assignments:
            self._line(NO_ASSIGNMENTS_MESSAGE)
            return

        for assignment in assignments:
            order = find_order_by_id(orders, assignment.order_id)
            self.order_processed(order, assignment)
            ledger.record(assignment)

        self.usage_summary(ledger)

    def order_processed(self, order: Order, assignment: Assignment) -> None:
        self._line(f"Processing order: {order.id}, Value: {order.value}")

        if assignment.points_used > ZERO:
            self._line(
                f"Selected payment method for {assignment.order_id}: "
                f"{POINTS_METHOD} Amount: {assignment.points_used}"
            )
        if assignment.card_used > ZERO:
            self._line(
                f"Selected payment method for {assignment.order_id}: "
                f"{assignment.payment_method} Amount: {assignment.card_used}"
            )

    def usage_summary(self, ledger: UsageLedger) -> None:
        for method_id, amount in ledger.summary():
            self._line(f"{method_id} {amount}")
