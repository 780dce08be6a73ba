"""Input value objects for creating and patching products."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from mercato.domain.catalog.exceptions import (
    InvalidPriceError,
    InvalidProductNameError,
    InvalidQuantityError,
)

PRICE_QUANTUM = Decimal("0.01")
# NUMERIC(10, 2)
PRICE_MAX = Decimal("99999999.99")
# INTEGER column
QUANTITY_MAX = 2_147_483_647
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 255


def normalize_price(value: Any) -> Decimal:
    """Coerce to a positive two-decimal Decimal or raise InvalidPriceError."""
    if isinstance(value, bool):
        raise InvalidPriceError("Price must be a number", value)
    try:
        amount = Decimal(str(value)).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        raise InvalidPriceError("Price must be a number", value) from e

    if not amount.is_finite() or amount <= 0:
        raise InvalidPriceError("Price must be a positive amount", value)
    if amount > PRICE_MAX:
        raise InvalidPriceError(f"Price cannot exceed {PRICE_MAX}", value)
    return amount


def normalize_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError("Quantity must be an integer", value)
    if value < 0:
        raise InvalidQuantityError("Quantity cannot be negative", value)
    if value > QUANTITY_MAX:
        raise InvalidQuantityError(f"Quantity cannot exceed {QUANTITY_MAX}", value)
    return value


def normalize_name(value: Any) -> str:
    name = value.strip() if isinstance(value, str) else ""
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        msg = (
            f"Product name must be between {NAME_MIN_LENGTH} and "
            f"{NAME_MAX_LENGTH} characters"
        )
        raise InvalidProductNameError(msg, details={"name": value})
    return name


@dataclass(frozen=True)
class NewProduct:
    """Fields a seller supplies when listing a product.

    The seller itself is never part of the input; it is the caller.
    """

    name: str
    sku: str
    price: Decimal
    quantity: int = 0


@dataclass(frozen=True)
class ProductChanges:
    """Partial update; ``None`` means leave the field unchanged."""

    name: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[int] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.sku, self.price, self.quantity)
        )
