"""Catalog domain manages seller-owned products.

This domain handles:
- Product aggregate (name, sku, price, quantity, owning seller)
- SKU normalization and listing query value objects
- The access policy deciding who may create, read, update and delete
"""

from mercato.domain.catalog.aggregates import Product
from mercato.domain.catalog.exceptions import (
    InvalidPriceError,
    InvalidProductNameError,
    InvalidProductQueryError,
    InvalidQuantityError,
    InvalidSkuError,
    ProductAccessDeniedError,
    ProductNotFoundError,
    SkuAlreadyExistsError,
)
from mercato.domain.catalog.repositories import ProductRepository
from mercato.domain.catalog.value_objects import (
    NewProduct,
    PageMeta,
    ProductChanges,
    ProductQuery,
    ProductSearchCriteria,
    SellerInfo,
    Sku,
    SortField,
    SortOrder,
)

__all__ = [
    "InvalidPriceError",
    "InvalidProductNameError",
    "InvalidProductQueryError",
    "InvalidQuantityError",
    "InvalidSkuError",
    "NewProduct",
    "PageMeta",
    "Product",
    "ProductAccessDeniedError",
    "ProductChanges",
    "ProductNotFoundError",
    "ProductQuery",
    "ProductRepository",
    "ProductSearchCriteria",
    "SellerInfo",
    "Sku",
    "SkuAlreadyExistsError",
    "SortField",
    "SortOrder",
]
