"""Product catalog service: seller-scoped CRUD and listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from mercato.application.dtos import ProductPage
from mercato.domain.catalog import (
    NewProduct,
    PageMeta,
    Product,
    ProductChanges,
    ProductNotFoundError,
    ProductQuery,
    ProductSearchCriteria,
    SellerInfo,
    Sku,
    SkuAlreadyExistsError,
)
from mercato.domain.catalog.services import ProductOperation, apply_scope, enforce

if TYPE_CHECKING:
    from mercato.domain.catalog import ProductRepository
    from mercato.domain.user import User

logger = logging.getLogger(__name__)


class ProductCatalogService:
    """
    Application service for the product catalog.

    Every operation consults the access policy before touching the store.
    Mutations load the product first so that a missing id is reported as
    not found regardless of who asks.
    """

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    async def create(self, data: NewProduct, actor: Optional[User]) -> Product:
        """
        List a new product owned by ``actor``.

        Raises
        ------
        ProductAccessDeniedError
            If the actor is not a seller
        SkuAlreadyExistsError
            If the normalized SKU is already taken
        """
        enforce(actor, ProductOperation.CREATE)

        sku = Sku(data.sku)
        if await self._product_repo.find_by_sku(sku.value) is not None:
            raise SkuAlreadyExistsError(sku.value)

        product = Product.create(
            data,
            seller=SellerInfo(id=actor.id, email=actor.email, name=actor.name),
        )
        product = await self._product_repo.save(product)

        logger.info(
            "Product %s (%s) created by seller %s",
            product.id,
            product.sku,
            product.seller_id,
        )
        return product

    async def find_all(
        self,
        query: ProductQuery,
        actor: Optional[User] = None,
    ) -> ProductPage:
        """List products visible to ``actor`` with filters and pagination.

        Sellers only ever see their own products; admins additionally
        match the search term against seller name and email.
        """
        enforce(actor, ProductOperation.READ_MANY)
        criteria = apply_scope(ProductSearchCriteria.from_query(query), actor)
        return await self._page(criteria, query)

    async def find_by_seller(
        self,
        seller_id: UUID,
        query: ProductQuery,
    ) -> ProductPage:
        """Public listing of a single seller's catalog."""
        criteria = ProductSearchCriteria.from_query(query).restricted_to_seller(
            seller_id,
        )
        return await self._page(criteria, query)

    async def find_one(self, product_id: UUID) -> Product:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def update(
        self,
        product_id: UUID,
        actor: Optional[User],
        changes: ProductChanges,
    ) -> Product:
        """
        Apply a partial update to a product owned by ``actor``.

        Raises
        ------
        ProductNotFoundError
            If the product does not exist
        ProductAccessDeniedError
            If the actor is not the owning seller
        SkuAlreadyExistsError
            If the new SKU belongs to another product
        """
        product = await self._product_repo.find_by_id(product_id)
        enforce(actor, ProductOperation.UPDATE, product, product_id=product_id)

        if changes.sku is not None:
            sku = Sku(changes.sku)
            if sku.value != product.sku:
                other = await self._product_repo.find_by_sku(sku.value)
                if other is not None and other.id != product.id:
                    raise SkuAlreadyExistsError(sku.value)

        product.apply_changes(changes)
        product = await self._product_repo.save(product)

        logger.info("Product %s updated by seller %s", product.id, product.seller_id)
        return product

    async def remove(self, product_id: UUID, actor: Optional[User]) -> None:
        product = await self._product_repo.find_by_id(product_id)
        enforce(actor, ProductOperation.DELETE, product, product_id=product_id)

        await self._product_repo.delete(product.id)
        logger.info("Product %s deleted by seller %s", product.id, product.seller_id)

    async def _page(
        self,
        criteria: ProductSearchCriteria,
        query: ProductQuery,
    ) -> ProductPage:
        items, total = await self._product_repo.search(criteria)
        return ProductPage(
            data=items,
            meta=PageMeta.build(total=total, page=query.page, limit=query.limit),
        )
