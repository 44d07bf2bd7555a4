"""Input adapters for order and payment method files."""

from paysplit.adapters.json_loader import (
    OrderRecord,
    OrdersJSONLoader,
    PaymentMethodRecord,
    PaymentMethodsJSONLoader,
)

__all__ = [
    "OrderRecord",
    "OrdersJSONLoader",
    "PaymentMethodRecord",
    "PaymentMethodsJSONLoader",
]
