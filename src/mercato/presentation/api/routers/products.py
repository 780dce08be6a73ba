"""Product catalog router."""

import logging
from decimal import Decimal
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from mercato.domain.catalog import ProductQuery
from mercato.presentation.api.dependencies import (
    CatalogService,
    CurrentUser,
    DBSession,
    OptionalCurrentUser,
)
from mercato.presentation.api.schemas.products import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Note: Don't set default in Query() when using Annotated - set it with = instead
PageParam = Annotated[int, Query(ge=1, description="Page number (1-based)")]
LimitParam = Annotated[int, Query(ge=1, le=100, description="Items per page")]
SearchParam = Annotated[
    Optional[str],
    Query(description="Case-insensitive match on name or SKU"),
]
MinPriceParam = Annotated[Optional[Decimal], Query(alias="minPrice", gt=0)]
MaxPriceParam = Annotated[Optional[Decimal], Query(alias="maxPrice", gt=0)]
SortByParam = Annotated[
    str,
    Query(alias="sortBy", description="name, price, stock or createdAt"),
]
OrderParam = Annotated[str, Query(description="ASC or DESC")]
IsActiveParam = Annotated[
    Optional[bool],
    Query(alias="isActive", description="Accepted but has no effect"),
]


def get_product_query(  # noqa: PLR0913
    page: PageParam = 1,
    limit: LimitParam = 10,
    search: SearchParam = None,
    min_price: MinPriceParam = None,
    max_price: MaxPriceParam = None,
    sort_by: SortByParam = "createdAt",
    order: OrderParam = "DESC",
    is_active: IsActiveParam = None,
) -> ProductQuery:
    """Collect listing query parameters into a ProductQuery."""
    return ProductQuery(
        page=page,
        limit=limit,
        search=search,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        order=order,
        is_active=is_active,
    )


ProductQueryDep = Annotated[ProductQuery, Depends(get_product_query)]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={
        201: {"description": "Product created"},
        401: {"description": "Not authenticated"},
        403: {"description": "Only sellers can create products"},
        409: {"description": "SKU already exists"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    user: CurrentUser,
    service: CatalogService,
    session: DBSession,
) -> ProductResponse:
    """
    List a new product.

    The authenticated seller becomes the owner; the owner is never taken
    from the request body.
    """
    try:
        product = await service.create(request.to_domain(), user)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ProductResponse.from_domain(product)


@router.get(
    "",
    summary="List products",
    responses={200: {"description": "Paginated product list"}},
)
async def list_products(
    query: ProductQueryDep,
    user: OptionalCurrentUser,
    service: CatalogService,
) -> ProductListResponse:
    """
    List products with search, price filters, sorting and pagination.

    Sellers only see their own products. Admins can also search by
    seller name or email. Anonymous callers and clients see everything.
    """
    page = await service.find_all(query, user)
    return ProductListResponse.from_page(page)


@router.get(
    "/seller/{seller_id}",
    summary="List a seller's products",
    responses={200: {"description": "Paginated product list"}},
)
async def list_seller_products(
    seller_id: UUID,
    query: ProductQueryDep,
    service: CatalogService,
) -> ProductListResponse:
    page = await service.find_by_seller(seller_id, query)
    return ProductListResponse.from_page(page)


@router.get(
    "/{product_id}",
    summary="Get a product",
    responses={
        200: {"description": "Product details"},
        404: {"description": "Product not found"},
    },
)
async def get_product(
    product_id: UUID,
    service: CatalogService,
) -> ProductResponse:
    product = await service.find_one(product_id)
    return ProductResponse.from_domain(product)


@router.put(
    "/{product_id}",
    summary="Update a product",
    responses={
        200: {"description": "Product updated"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owning seller"},
        404: {"description": "Product not found"},
        409: {"description": "SKU already exists"},
    },
)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    user: CurrentUser,
    service: CatalogService,
    session: DBSession,
) -> ProductResponse:
    """Partially update a product owned by the authenticated seller."""
    try:
        product = await service.update(product_id, user, request.to_domain())
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return ProductResponse.from_domain(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    responses={
        204: {"description": "Product deleted"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owning seller"},
        404: {"description": "Product not found"},
    },
)
async def delete_product(
    product_id: UUID,
    user: CurrentUser,
    service: CatalogService,
    session: DBSession,
) -> None:
    try:
        await service.remove(product_id, user)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
