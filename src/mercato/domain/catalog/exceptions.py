"""Catalog domain exceptions."""

from typing import Any
from uuid import UUID

from mercato.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class InvalidSkuError(ValidationError):
    """Raised when a SKU is empty, too short/long or has illegal characters."""

    def __init__(self, message: str, sku: str | None = None) -> None:
        super().__init__(message, code=ErrorCode.INVALID_SKU, details={"sku": sku})


class InvalidPriceError(ValidationError):
    """Raised when a price is not a positive amount."""

    def __init__(self, message: str, price: Any = None) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_PRICE,
            details={"price": str(price)},
        )


class InvalidQuantityError(ValidationError):
    """Raised when a stock quantity is negative or not an integer."""

    def __init__(self, message: str, quantity: Any = None) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_QUANTITY,
            details={"quantity": quantity},
        )


class InvalidProductNameError(ValidationError):
    """Raised when a product name is blank or out of bounds."""


class InvalidProductQueryError(ValidationError):
    """Raised when listing parameters are out of range."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, code=ErrorCode.INVALID_QUERY, details=details)


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product id does not exist."""

    def __init__(self, product_id: UUID | str | None = None) -> None:
        self.product_id = str(product_id) if product_id is not None else None
        super().__init__(
            "Product not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": self.product_id} if self.product_id else None,
        )


class SkuAlreadyExistsError(ConflictError):
    """Raised when another product already uses the normalized SKU."""

    def __init__(self, sku: str) -> None:
        self.sku = sku
        super().__init__(
            f"SKU {sku} already exists",
            code=ErrorCode.SKU_ALREADY_EXISTS,
            details={"sku": sku},
        )


class ProductAccessDeniedError(ForbiddenError):
    """Raised when the access policy denies an operation on products."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
