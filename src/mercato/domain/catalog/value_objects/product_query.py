"""Listing parameters and the search criteria handed to the repository.

``ProductQuery`` is what a caller asks for. ``ProductSearchCriteria`` is the
fully-scoped conjunction of predicates the store executes, after the access
policy has added its ownership restriction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from math import ceil
from typing import Optional
from uuid import UUID

from mercato.domain.catalog.exceptions import InvalidProductQueryError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class SortField(str, Enum):
    """Sortable product columns (values are the public API names)."""

    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"
    CREATED_AT = "createdAt"

    @classmethod
    def parse(cls, value: str | SortField) -> SortField:
        if isinstance(value, SortField):
            return value
        if value == "stock":
            return cls.QUANTITY
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidProductQueryError(
                f"Cannot sort by '{value}'",
                sort_by=value,
            ) from e


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str | SortOrder) -> SortOrder:
        if isinstance(value, SortOrder):
            return value
        try:
            return cls(value.upper())
        except ValueError as e:
            raise InvalidProductQueryError(
                f"Order must be ASC or DESC, got '{value}'",
                order=value,
            ) from e


@dataclass(frozen=True)
class ProductQuery:
    """Caller-facing listing parameters with their defaults.

    ``is_active`` is accepted for API compatibility; products have no
    active flag, so it does not add a predicate.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort_by: SortField = SortField.CREATED_AT
    order: SortOrder = SortOrder.DESC
    is_active: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidProductQueryError("Page must be at least 1", page=self.page)
        if not 1 <= self.limit <= MAX_LIMIT:
            raise InvalidProductQueryError(
                f"Limit must be between 1 and {MAX_LIMIT}",
                limit=self.limit,
            )
        for field_name in ("min_price", "max_price"):
            value = getattr(self, field_name)
            if value is not None and value <= 0:
                raise InvalidProductQueryError(
                    f"{field_name} must be positive",
                    **{field_name: str(value)},
                )

        search = self.search.strip() if self.search else None
        object.__setattr__(self, "search", search or None)
        object.__setattr__(self, "sort_by", SortField.parse(self.sort_by))
        object.__setattr__(self, "order", SortOrder.parse(self.order))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ProductSearchCriteria:
    """Conjunctive predicate set executed by ProductRepository.search.

    Every non-None field contributes one AND-ed clause:
    - ``search``: case-insensitive substring on name OR sku, widened to
      seller name/email when ``search_seller_fields`` is set
    - ``min_price`` / ``max_price``: inclusive bounds
    - ``seller_id``: ownership restriction
    """

    search: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    seller_id: Optional[UUID] = None
    search_seller_fields: bool = False
    sort_by: SortField = SortField.CREATED_AT
    order: SortOrder = SortOrder.DESC
    offset: int = 0
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, query: ProductQuery) -> ProductSearchCriteria:
        return cls(
            search=query.search,
            min_price=query.min_price,
            max_price=query.max_price,
            sort_by=query.sort_by,
            order=query.order,
            offset=query.offset,
            limit=query.limit,
        )

    def restricted_to_seller(self, seller_id: UUID) -> ProductSearchCriteria:
        return replace(self, seller_id=seller_id)

    def with_seller_search(self) -> ProductSearchCriteria:
        return replace(self, search_seller_fields=True)


@dataclass(frozen=True)
class PageMeta:
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> PageMeta:
        return cls(
            total=total,
            page=page,
            limit=limit,
            total_pages=ceil(total / limit),
        )
