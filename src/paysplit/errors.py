from __future__ import annotations


class PaySplitError(Exception):
    """Base class for errors raised by paysplit."""


class OrderNotFoundError(PaySplitError, LookupError):
    """Raised when an order id does not resolve to a loaded order."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class PaymentMethodNotFoundError(PaySplitError, LookupError):
    """Raised when a payment method id does not resolve to a loaded method."""

    def __init__(self, method_id: str) -> None:
        super().__init__(f"Payment method not found: {method_id}")
        self.method_id = method_id


class InputLoadError(PaySplitError):
    """Raised when an input file is missing or cannot be parsed."""


class BatchTooLargeError(PaySplitError):
    """Raised when a batch exceeds the configured order count."""
