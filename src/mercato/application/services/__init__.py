"""Application layer services."""

from mercato.application.services.authentication_service import (
    AuthenticationService,
)
from mercato.application.services.product_catalog_service import (
    ProductCatalogService,
)

__all__ = [
    "AuthenticationService",
    "ProductCatalogService",
]
