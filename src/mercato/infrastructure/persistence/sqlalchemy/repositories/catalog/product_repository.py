"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mercato.domain.catalog import (
    Product,
    ProductRepository,
    ProductSearchCriteria,
    SellerInfo,
    SkuAlreadyExistsError,
    SortField,
    SortOrder,
)
from mercato.domain.shared.time import ensure_tz_aware
from mercato.infrastructure.persistence.sqlalchemy.models import (
    ProductModel,
    UserModel,
)
from mercato.infrastructure.persistence.sqlalchemy.repositories._utils import (
    escape_like,
    is_unique_violation,
    storage_errors,
)

logger = logging.getLogger(__name__)

_SORT_COLUMNS: dict[SortField, Any] = {
    SortField.NAME: ProductModel.name,
    SortField.PRICE: ProductModel.price,
    SortField.QUANTITY: ProductModel.quantity,
    SortField.CREATED_AT: ProductModel.created_at,
}


class ProductRepositorySQLAlchemy(ProductRepository):
    """
    SQLAlchemy implementation of the ProductRepository interface.

    Listing predicates are composed into a single clause list that is
    shared by the page query and the count query, so ``total`` always
    reflects exactly the filters applied to the page.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: UUID) -> Optional[Product]:
        return await self._find_one(ProductModel.id == product_id)

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        return await self._find_one(ProductModel.sku == sku.strip().upper())

    async def search(
        self,
        criteria: ProductSearchCriteria,
    ) -> tuple[list[Product], int]:
        clauses = self._build_clauses(criteria)

        sort_column = _SORT_COLUMNS[criteria.sort_by]
        ordering = (
            sort_column.asc() if criteria.order == SortOrder.ASC else sort_column.desc()
        )
        page_stmt = (
            self._select_with_seller()
            .where(*clauses)
            .order_by(ordering, ProductModel.id.asc())
            .offset(criteria.offset)
            .limit(criteria.limit)
        )
        count_stmt = (
            select(func.count(ProductModel.id))
            .select_from(ProductModel)
            .join(UserModel, ProductModel.seller_id == UserModel.id)
            .where(*clauses)
        )

        with storage_errors("search products"):
            total = (await self._session.execute(count_stmt)).scalar_one()
            rows = (await self._session.execute(page_stmt)).all()

        logger.debug(
            "Product search returned %d of %d (offset=%d, limit=%d)",
            len(rows),
            total,
            criteria.offset,
            criteria.limit,
        )
        return [self._map_to_domain(product, seller) for product, seller in rows], total

    async def save(self, product: Product) -> Product:
        existing = await self._find_model_by_id(product.id)

        with storage_errors("save product"):
            try:
                if existing:
                    self._update_model(existing, product)
                    logger.debug("Updated product: %s", product.id)
                else:
                    self._session.add(self._map_to_model(product))
                    logger.debug(
                        "Created product: %s (sku: %s)",
                        product.id,
                        product.sku,
                    )

                await self._session.flush()
            except IntegrityError as e:
                if is_unique_violation(e):
                    raise SkuAlreadyExistsError(product.sku) from e
                raise

        saved = await self.find_by_id(product.id)
        return saved if saved is not None else product

    async def delete(self, product_id: UUID) -> bool:
        model = await self._find_model_by_id(product_id)
        if model is None:
            return False

        with storage_errors("delete product"):
            await self._session.delete(model)
            await self._session.flush()

        logger.debug("Deleted product: %s", product_id)
        return True

    def _build_clauses(
        self,
        criteria: ProductSearchCriteria,
    ) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []

        if criteria.search:
            pattern = f"%{escape_like(criteria.search.lower())}%"
            fields = [ProductModel.name, ProductModel.sku]
            if criteria.search_seller_fields:
                fields += [UserModel.name, UserModel.email]
            clauses.append(
                or_(*(func.lower(f).like(pattern, escape="\\") for f in fields)),
            )

        if criteria.min_price is not None:
            clauses.append(ProductModel.price >= criteria.min_price)
        if criteria.max_price is not None:
            clauses.append(ProductModel.price <= criteria.max_price)
        if criteria.seller_id is not None:
            clauses.append(ProductModel.seller_id == criteria.seller_id)

        return [and_(*clauses)] if clauses else []

    def _select_with_seller(self) -> Select[tuple[ProductModel, UserModel]]:
        return select(ProductModel, UserModel).join(
            UserModel,
            ProductModel.seller_id == UserModel.id,
        )

    async def _find_one(self, condition: ColumnElement[bool]) -> Optional[Product]:
        stmt = self._select_with_seller().where(condition)
        with storage_errors("find product"):
            row = (await self._session.execute(stmt)).one_or_none()
        if row is None:
            return None
        product, seller = row
        return self._map_to_domain(product, seller)

    async def _find_model_by_id(self, product_id: UUID) -> Optional[ProductModel]:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        with storage_errors("find product by id"):
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ProductModel, seller: UserModel) -> Product:
        return Product.reconstitute(
            id=model.id,
            name=model.name,
            sku=model.sku,
            price=model.price,
            quantity=model.quantity,
            seller_id=model.seller_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            seller=SellerInfo(id=seller.id, email=seller.email, name=seller.name),
        )

    def _map_to_model(self, product: Product) -> ProductModel:
        return ProductModel(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=product.price,
            quantity=product.quantity,
            seller_id=product.seller_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def _update_model(self, model: ProductModel, product: Product) -> None:
        # seller_id never changes
        model.name = product.name
        model.sku = product.sku
        model.price = product.price
        model.quantity = product.quantity
        model.updated_at = product.updated_at
