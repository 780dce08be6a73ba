from mercato.domain.catalog.value_objects.product_input import (
    NewProduct,
    QUANTITY_MAX,
    ProductChanges,
    normalize_name,
    normalize_price,
    normalize_quantity,
)
from mercato.domain.catalog.value_objects.product_query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    PageMeta,
    ProductQuery,
    ProductSearchCriteria,
    SortField,
    SortOrder,
)
from mercato.domain.catalog.value_objects.seller_info import SellerInfo
from mercato.domain.catalog.value_objects.sku import Sku

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "NewProduct",
    "PageMeta",
    "ProductChanges",
    "ProductQuery",
    "ProductSearchCriteria",
    "QUANTITY_MAX",
    "SellerInfo",
    "Sku",
    "SortField",
    "SortOrder",
    "normalize_name",
    "normalize_price",
    "normalize_quantity",
]
