"""Shared builders for mercato tests."""

from decimal import Decimal
from uuid import UUID

import pytest

from mercato.domain.catalog import Product, SellerInfo
from mercato.domain.user import User, UserRole

SELLER_A_ID = UUID("aaaaaaaa-0000-0000-0000-000000000001")
SELLER_B_ID = UUID("bbbbbbbb-0000-0000-0000-000000000002")
ADMIN_ID = UUID("cccccccc-0000-0000-0000-000000000003")
CLIENT_ID = UUID("dddddddd-0000-0000-0000-000000000004")


def make_user(
    user_id: UUID,
    email: str,
    role: UserRole,
    name: str | None = None,
) -> User:
    return User(email=email, name=name, role=role, id=user_id)


def make_product(
    seller: User,
    sku: str = "SKU-001",
    name: str = "Widget",
    price: str = "10.00",
    quantity: int = 1,
) -> Product:
    return Product(
        name=name,
        sku=sku,
        price=Decimal(price),
        quantity=quantity,
        seller_id=seller.id,
        seller=SellerInfo(id=seller.id, email=seller.email, name=seller.name),
    )


@pytest.fixture
def seller_a() -> User:
    return make_user(SELLER_A_ID, "seller.a@example.com", UserRole.SELLER, "Alice")


@pytest.fixture
def seller_b() -> User:
    return make_user(SELLER_B_ID, "seller.b@example.com", UserRole.SELLER, "Bruno")


@pytest.fixture
def admin() -> User:
    return make_user(ADMIN_ID, "admin@example.com", UserRole.ADMIN, "Root")


@pytest.fixture
def client_user() -> User:
    return make_user(CLIENT_ID, "client@example.com", UserRole.CLIENT, "Carla")


@pytest.fixture
def product_factory():
    """Build in-memory products; defaults give a valid product."""
    return make_product
