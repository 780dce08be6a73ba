"""Pydantic schemas for API requests and responses."""

from mercato.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from mercato.presentation.api.schemas.common import ErrorResponse, HealthResponse
from mercato.presentation.api.schemas.products import (
    PageMetaResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
    SellerResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "PageMetaResponse",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "ProductUpdateRequest",
    "RegisterRequest",
    "SellerResponse",
    "UserResponse",
]
