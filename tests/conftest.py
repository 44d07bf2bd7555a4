"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal
import sys

from loguru import logger
import pytest

from paysplit.core.entities import PaymentMethod, build_payment_method_map


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Restore the default loguru sink after each test.

    The CLI replaces loguru sinks with one bound to the stderr stream that
    is current at the time, which CliRunner closes when the command ends.
    """
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def payment_methods() -> list[PaymentMethod]:
    """Points pool plus two cards, in load order."""
    return [
        PaymentMethod(id="PUNKTY", discount=0, limit=Decimal("50.00")),
        PaymentMethod(id="mZysk", discount=10, limit=Decimal("1000.00")),
        PaymentMethod(id="BosBankrut", discount=5, limit=Decimal("500.00")),
    ]


@pytest.fixture
def payment_map(payment_methods: list[PaymentMethod]) -> dict[str, PaymentMethod]:
    return build_payment_method_map(payment_methods)
