"""Unit tests for ProductCatalogService."""

from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from mercato.application.services import ProductCatalogService
from mercato.domain.catalog import (
    NewProduct,
    ProductAccessDeniedError,
    ProductChanges,
    ProductNotFoundError,
    ProductQuery,
    SkuAlreadyExistsError,
    SortField,
    SortOrder,
)


def _echo_save(product):
    return product


class TestProductCatalogServiceCreate:
    """Tests for creating products."""

    def setup_method(self):
        self.product_repo = AsyncMock()
        self.product_repo.save.side_effect = _echo_save
        self.service = ProductCatalogService(product_repository=self.product_repo)

    async def test_seller_creates_product_owned_by_self(self, seller_a):
        # Arrange
        self.product_repo.find_by_sku.return_value = None
        data = NewProduct(name="Keyboard", sku="kb-001", price=Decimal("89.90"))

        # Act
        product = await self.service.create(data, seller_a)

        # Assert
        assert product.seller_id == seller_a.id
        assert product.sku == "KB-001"
        assert product.seller.email == seller_a.email
        self.product_repo.find_by_sku.assert_awaited_once_with("KB-001")
        self.product_repo.save.assert_awaited_once()

    @pytest.mark.parametrize("actor_fixture", ["client_user", "admin"])
    async def test_non_seller_is_forbidden_and_nothing_persisted(
        self,
        actor_fixture,
        request,
    ):
        actor = request.getfixturevalue(actor_fixture)
        data = NewProduct(name="Keyboard", sku="KB-001", price=Decimal("10"))

        with pytest.raises(ProductAccessDeniedError):
            await self.service.create(data, actor)

        self.product_repo.find_by_sku.assert_not_called()
        self.product_repo.save.assert_not_called()

    async def test_anonymous_is_forbidden(self):
        data = NewProduct(name="Keyboard", sku="KB-001", price=Decimal("10"))

        with pytest.raises(ProductAccessDeniedError):
            await self.service.create(data, None)

    async def test_sku_collision_is_case_insensitive(
        self,
        seller_a,
        seller_b,
        product_factory,
    ):
        """A lowercase SKU collides with the existing uppercase one."""
        self.product_repo.find_by_sku.return_value = product_factory(
            seller_b,
            sku="ABC-123",
        )
        data = NewProduct(name="Copy", sku="abc-123", price=Decimal("5"))

        with pytest.raises(SkuAlreadyExistsError):
            await self.service.create(data, seller_a)

        self.product_repo.find_by_sku.assert_awaited_once_with("ABC-123")
        self.product_repo.save.assert_not_called()


class TestProductCatalogServiceList:
    """Tests for listings."""

    def setup_method(self):
        self.product_repo = AsyncMock()
        self.service = ProductCatalogService(product_repository=self.product_repo)

    async def test_pagination_meta(self, seller_a, product_factory):
        """total=23, limit=10, page=3 gives 3 items and 3 pages."""
        items = [product_factory(seller_a, sku=f"SKU-{i:03d}") for i in range(3)]
        self.product_repo.search.return_value = (items, 23)

        page = await self.service.find_all(ProductQuery(page=3, limit=10))

        assert len(page.data) == 3
        assert page.meta.total == 23
        assert page.meta.page == 3
        assert page.meta.limit == 10
        assert page.meta.total_pages == 3
        criteria = self.product_repo.search.await_args.args[0]
        assert criteria.offset == 20
        assert criteria.limit == 10

    async def test_seller_listing_is_scoped_to_seller(self, seller_a):
        self.product_repo.search.return_value = ([], 0)

        await self.service.find_all(ProductQuery(search="kb"), seller_a)

        criteria = self.product_repo.search.await_args.args[0]
        assert criteria.seller_id == seller_a.id
        assert criteria.search == "kb"
        assert not criteria.search_seller_fields

    async def test_admin_listing_searches_seller_fields(self, admin):
        self.product_repo.search.return_value = ([], 0)

        await self.service.find_all(ProductQuery(search="alice"), admin)

        criteria = self.product_repo.search.await_args.args[0]
        assert criteria.seller_id is None
        assert criteria.search_seller_fields

    async def test_anonymous_listing_is_unrestricted(self):
        self.product_repo.search.return_value = ([], 0)

        page = await self.service.find_all(
            ProductQuery(sort_by="stock", order="ASC"),
        )

        criteria = self.product_repo.search.await_args.args[0]
        assert criteria.seller_id is None
        assert criteria.sort_by == SortField.QUANTITY
        assert criteria.order == SortOrder.ASC
        assert page.meta.total_pages == 0

    async def test_find_by_seller_restricts_to_that_seller(self, client_user):
        seller_id = uuid4()
        self.product_repo.search.return_value = ([], 0)

        await self.service.find_by_seller(seller_id, ProductQuery(limit=5))

        criteria = self.product_repo.search.await_args.args[0]
        assert criteria.seller_id == seller_id
        assert criteria.limit == 5


class TestProductCatalogServiceFindOne:
    """Tests for single product lookup."""

    def setup_method(self):
        self.product_repo = AsyncMock()
        self.service = ProductCatalogService(product_repository=self.product_repo)

    async def test_find_one_returns_product(self, seller_a, product_factory):
        product = product_factory(seller_a)
        self.product_repo.find_by_id.return_value = product

        assert await self.service.find_one(product.id) == product

    async def test_find_one_missing_raises(self):
        self.product_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFoundError):
            await self.service.find_one(uuid4())


class TestProductCatalogServiceUpdate:
    """Tests for updating products."""

    def setup_method(self):
        self.product_repo = AsyncMock()
        self.product_repo.save.side_effect = _echo_save
        self.service = ProductCatalogService(product_repository=self.product_repo)

    async def test_owner_and_non_owner_update(
        self,
        seller_a,
        seller_b,
        product_factory,
    ):
        """Seller B cannot change A's product; A can."""
        # Arrange
        product = product_factory(seller_a, price="10.00")
        self.product_repo.find_by_id.return_value = product

        # Act & Assert: seller B is rejected and the product is unchanged
        with pytest.raises(ProductAccessDeniedError):
            await self.service.update(
                product.id,
                seller_b,
                ProductChanges(price=Decimal("5")),
            )
        assert product.price == Decimal("10.00")
        self.product_repo.save.assert_not_called()

        # Act & Assert: seller A succeeds
        updated = await self.service.update(
            product.id,
            seller_a,
            ProductChanges(price=Decimal("5")),
        )
        assert updated.price == Decimal("5.00")
        assert updated.seller_id == seller_a.id

    async def test_missing_product_is_not_found_before_ownership(self, seller_b):
        self.product_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFoundError):
            await self.service.update(uuid4(), seller_b, ProductChanges(quantity=1))

    async def test_sku_change_colliding_with_other_product_conflicts(
        self,
        seller_a,
        seller_b,
        product_factory,
    ):
        product = product_factory(seller_a, sku="KB-001")
        other = product_factory(seller_b, sku="KB-002")
        self.product_repo.find_by_id.return_value = product
        self.product_repo.find_by_sku.return_value = other

        with pytest.raises(SkuAlreadyExistsError):
            await self.service.update(
                product.id,
                seller_a,
                ProductChanges(sku="kb-002"),
            )

        assert product.sku == "KB-001"
        self.product_repo.save.assert_not_called()

    async def test_same_sku_in_other_case_is_not_a_conflict(
        self,
        seller_a,
        product_factory,
    ):
        product = product_factory(seller_a, sku="KB-001")
        self.product_repo.find_by_id.return_value = product

        updated = await self.service.update(
            product.id,
            seller_a,
            ProductChanges(sku="kb-001", name="Renamed"),
        )

        assert updated.sku == "KB-001"
        assert updated.name == "Renamed"
        self.product_repo.find_by_sku.assert_not_called()


class TestProductCatalogServiceRemove:
    """Tests for deleting products."""

    def setup_method(self):
        self.product_repo = AsyncMock()
        self.service = ProductCatalogService(product_repository=self.product_repo)

    async def test_owner_deletes(self, seller_a, product_factory):
        product = product_factory(seller_a)
        self.product_repo.find_by_id.return_value = product

        await self.service.remove(product.id, seller_a)

        self.product_repo.delete.assert_awaited_once_with(product.id)

    async def test_non_owner_is_forbidden(self, seller_a, seller_b, product_factory):
        product = product_factory(seller_a)
        self.product_repo.find_by_id.return_value = product

        with pytest.raises(ProductAccessDeniedError):
            await self.service.remove(product.id, seller_b)

        self.product_repo.delete.assert_not_called()

    async def test_missing_product_is_not_found(self, seller_a):
        self.product_repo.find_by_id.return_value = None
        missing_id = uuid4()

        with pytest.raises(ProductNotFoundError) as exc_info:
            await self.service.remove(missing_id, seller_a)

        assert exc_info.value.product_id == str(missing_id)
        self.product_repo.delete.assert_not_called()
