"""Logging for the assignment search.

Keeps log calls out of the search code so the core stays readable.
"""

from __future__ import annotations

from decimal import Decimal

import loguru
from loguru import logger


class OptimizerLogger:
    """Handles all logging for the assignment search."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        """Initialize logger.

        Args:
            logger_instance: Logger instance to use (defaults to loguru.logger)
        """
        self._logger = logger_instance

    def search_start(self, order_count: int, method_count: int) -> None:
        """Log start of the exhaustive search."""
        self._logger.bind(orders=order_count, methods=method_count).info(
            "Searching assignments for {} orders across {} payment methods",
            order_count,
            method_count,
        )

    def best_replaced(self, candidate_index: int, total_cost: Decimal) -> None:
        """Log a candidate taking over as the current best."""
        self._logger.bind(candidate=candidate_index, total_cost=str(total_cost)).debug(
            "Candidate #{} is the new best (total cost {})",
            candidate_index,
            total_cost,
        )

    def search_complete(
        self,
        candidate_count: int,
        valid_count: int,
        best_cost: Decimal | None,
    ) -> None:
        """Log search completion summary."""
        self._logger.bind(
            candidates=candidate_count,
            valid=valid_count,
            best_cost=None if best_cost is None else str(best_cost),
        ).info(
            "Found {} possible combinations, {} within limits",
            candidate_count,
            valid_count,
        )

    def no_feasible_assignment(self, order_count: int) -> None:
        """Log that no candidate survived the limit checks."""
        self._logger.bind(orders=order_count).info(
            "No feasible assignment for batch of {} orders", order_count
        )
