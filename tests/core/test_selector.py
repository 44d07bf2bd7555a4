"""Tests for top-level assignment selection."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from paysplit.core.comparator import calculate_total_cost
from paysplit.core.entities import Order, PaymentMethod, build_payment_method_map
from paysplit.core.logger import OptimizerLogger
from paysplit.core.selector import find_optimal_assignments
from paysplit.errors import BatchTooLargeError


class TestFindOptimalAssignments:
    """Tests for find_optimal_assignments."""

    def test_picks_cheapest_promotion(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        # Input
        orders = [Order("1", Decimal("100.00"), ("mZysk", "BosBankrut"))]

        # Act
        assignments = find_optimal_assignments(orders, payment_map)

        # Assert
        assert len(assignments) == 1
        assert assignments[0].order_id == "1"
        assert assignments[0].payment_method == "mZysk"
        assert assignments[0].cost == Decimal("90.00")

    def test_returns_empty_when_nothing_fits(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        """Points cannot cover 1100.00 and the combo card limit is too low."""
        orders = [Order("2", Decimal("1100.00"))]

        assignments = find_optimal_assignments(orders, payment_map)

        assert assignments == ()

    def test_spreads_points_across_orders(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        # Input
        orders = [Order("1", Decimal("30.00")), Order("2", Decimal("40.00"))]

        # Act
        assignments = find_optimal_assignments(orders, payment_map)

        # Assert
        assert [(a.points_used, a.card_used) for a in assignments] == [
            (Decimal("15.00"), Decimal("12.00")),
            (Decimal("35.00"), Decimal("1.00")),
        ]
        assert calculate_total_cost(assignments) == Decimal("63.00")

    def test_skips_candidates_over_shared_limit(self) -> None:
        # Input
        methods = build_payment_method_map(
            [
                PaymentMethod("PUNKTY", 0, Decimal("0.00")),
                PaymentMethod("Cheap", 20, Decimal("100.00")),
                PaymentMethod("Dear", 5, Decimal("1000.00")),
            ]
        )
        orders = [
            Order("1", Decimal("100.00"), ("Cheap", "Dear")),
            Order("2", Decimal("100.00"), ("Cheap", "Dear")),
        ]

        # Act
        assignments = find_optimal_assignments(orders, methods)

        # Assert
        assert [a.payment_method for a in assignments] == ["Cheap", "Dear"]
        assert calculate_total_cost(assignments) == Decimal("175.00")

    def test_first_candidate_wins_ties(self) -> None:
        methods = build_payment_method_map(
            [
                PaymentMethod("PUNKTY", 0, Decimal("0.00")),
                PaymentMethod("A", 10, Decimal("1000.00")),
                PaymentMethod("B", 10, Decimal("1000.00")),
            ]
        )
        orders = [Order("1", Decimal("100.00"), ("B", "A"))]

        assignments = find_optimal_assignments(orders, methods)

        assert assignments[0].payment_method == "B"

    def test_repeated_runs_agree_on_cost(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        orders = [
            Order("1", Decimal("30.00")),
            Order("2", Decimal("100.00"), ("mZysk", "BosBankrut")),
            Order("3", Decimal("40.00")),
        ]

        first = find_optimal_assignments(orders, payment_map)
        second = find_optimal_assignments(orders, payment_map)

        assert first == second
        assert calculate_total_cost(first) == calculate_total_cost(second)

    def test_rejects_batch_over_max_orders(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        orders = [Order(str(i), Decimal("1.00")) for i in range(3)]

        with pytest.raises(BatchTooLargeError):
            find_optimal_assignments(orders, payment_map, max_orders=2)

    def test_logs_when_no_assignment_fits(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        # Setup
        mock_logger = MagicMock(spec=OptimizerLogger)

        # Act
        find_optimal_assignments(
            [Order("2", Decimal("1100.00"))],
            payment_map,
            optimizer_logger=mock_logger,
        )

        # Assert
        mock_logger.search_complete.assert_called_once_with(0, 0, None)
        mock_logger.no_feasible_assignment.assert_called_once_with(1)

    def test_logs_search_summary(
        self, payment_map: dict[str, PaymentMethod]
    ) -> None:
        mock_logger = MagicMock(spec=OptimizerLogger)

        find_optimal_assignments(
            [Order("1", Decimal("100.00"), ("mZysk", "BosBankrut"))],
            payment_map,
            optimizer_logger=mock_logger,
        )

        mock_logger.search_start.assert_called_once_with(1, 3)
        mock_logger.search_complete.assert_called_once_with(2, 2, Decimal("90.00"))
        mock_logger.no_feasible_assignment.assert_not_called()
