"""Product schemas for request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from mercato.application.dtos import ProductPage
from mercato.domain.catalog import NewProduct, Product, ProductChanges
from mercato.domain.catalog.value_objects import QUANTITY_MAX


class ProductCreateRequest(BaseModel):
    """Request schema for listing a new product.

    The SKU is uppercased server-side, so ``abc-123`` is stored as ``ABC-123``.
    """

    name: str = Field(..., min_length=2, max_length=255)
    sku: str = Field(..., min_length=3, max_length=100)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    quantity: int = Field(default=0, ge=0, le=QUANTITY_MAX)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Mechanical Keyboard",
                "sku": "KB-001",
                "price": "89.90",
                "quantity": 12,
            },
        },
    )

    def to_domain(self) -> NewProduct:
        return NewProduct(
            name=self.name,
            sku=self.sku,
            price=self.price,
            quantity=self.quantity,
        )


class ProductUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their current value."""

    name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    sku: Optional[str] = Field(default=None, min_length=3, max_length=100)
    price: Optional[Decimal] = Field(
        default=None,
        gt=0,
        max_digits=10,
        decimal_places=2,
    )
    quantity: Optional[int] = Field(default=None, ge=0, le=QUANTITY_MAX)

    def to_domain(self) -> ProductChanges:
        return ProductChanges(
            name=self.name,
            sku=self.sku,
            price=self.price,
            quantity=self.quantity,
        )


class SellerResponse(BaseModel):
    id: UUID
    email: str
    name: Optional[str]


class ProductResponse(BaseModel):
    """Response schema for a single product."""

    id: UUID
    name: str
    sku: str
    price: Decimal
    quantity: int
    seller_id: UUID
    seller: Optional[SellerResponse] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        seller = product.seller
        return cls(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=product.price,
            quantity=product.quantity,
            seller_id=product.seller_id,
            seller=(
                SellerResponse(id=seller.id, email=seller.email, name=seller.name)
                if seller
                else None
            ),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PageMetaResponse(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., serialization_alias="totalPages")


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    data: list[ProductResponse]
    meta: PageMetaResponse

    @classmethod
    def from_page(cls, page: ProductPage) -> "ProductListResponse":
        return cls(
            data=[ProductResponse.from_domain(p) for p in page.data],
            meta=PageMetaResponse(
                total=page.meta.total,
                page=page.meta.page,
                limit=page.meta.limit,
                total_pages=page.meta.total_pages,
            ),
        )
