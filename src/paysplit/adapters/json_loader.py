"""JSON loaders for orders and payment methods."""

from __future__ import annotations

from decimal import Decimal
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paysplit.core.entities import Order, PaymentMethod
from paysplit.errors import InputLoadError


class OrderRecord(BaseModel):
    """Order as it appears in the orders file."""

    model_config = ConfigDict(extra="ignore")

    id: str
    value: Decimal = Field(..., ge=0, description="Order value in currency units")
    promotions: list[str] | None = Field(
        None, description="Payment method ids the order is eligible for"
    )

    def to_order(self) -> Order:
        promotions = None if self.promotions is None else tuple(self.promotions)
        return Order(id=self.id, value=self.value, promotions=promotions)


class PaymentMethodRecord(BaseModel):
    """Payment method as it appears in the payment methods file."""

    model_config = ConfigDict(extra="ignore")

    id: str
    discount: int = Field(..., ge=0, le=100, description="Discount in percent")
    limit: Decimal = Field(..., ge=0, description="Maximum amount for the batch")

    def to_payment_method(self) -> PaymentMethod:
        return PaymentMethod(id=self.id, discount=self.discount, limit=self.limit)


def _read_json_array(path: Path) -> list[Any]:
    """Read a JSON array, keeping numbers with a fraction as Decimal."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputLoadError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise InputLoadError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise InputLoadError(
            f"Expected a JSON array in {path}, got {type(data).__name__}"
        )
    return data


class OrdersJSONLoader:
    """Loads orders from a JSON array file."""

    def __init__(self, path: Path):
        """Initialize loader.

        Args:
            path: File containing a JSON array of order objects
        """
        self._path = path

    def load(self) -> list[Order]:
        """Load and validate orders, keeping file order.

        Raises:
            InputLoadError: If the file is missing, malformed, or an entry is
                not a valid order.
        """
        rows = _read_json_array(self._path)
        try:
            return [OrderRecord.model_validate(row).to_order() for row in rows]
        except ValidationError as e:
            raise InputLoadError(f"Invalid order in {self._path}: {e}") from e


class PaymentMethodsJSONLoader:
    """Loads payment methods from a JSON array file."""

    def __init__(self, path: Path):
        """Initialize loader.

        Args:
            path: File containing a JSON array of payment method objects
        """
        self._path = path

    def load(self) -> list[PaymentMethod]:
        """Load and validate payment methods, keeping file order.

        Raises:
            InputLoadError: If the file is missing, malformed, or an entry is
                not a valid payment method.
        """
        rows = _read_json_array(self._path)
        try:
            return [
                PaymentMethodRecord.model_validate(row).to_payment_method()
                for row in rows
            ]
        except ValidationError as e:
            raise InputLoadError(
                f"Invalid payment method in {self._path}: {e}"
            ) from e
