"""
Pytest fixtures for repository tests.

Each test gets a fresh in-memory SQLite database shared over a single
connection (StaticPool).
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from mercato.domain.user import User
from mercato.infrastructure.persistence.sqlalchemy.init_db import create_tables
from mercato.infrastructure.persistence.sqlalchemy.repositories import (
    ProductRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


@pytest_asyncio.fixture
async def async_engine(sqlite_engine_factory):
    engine = sqlite_engine_factory(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine):
    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def user_repo(async_session) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(async_session)


@pytest_asyncio.fixture
async def product_repo(async_session) -> ProductRepositorySQLAlchemy:
    return ProductRepositorySQLAlchemy(async_session)


@pytest_asyncio.fixture
async def stored_sellers(
    user_repo,
    seller_a: User,
    seller_b: User,
    admin: User,
) -> tuple[User, User]:
    """Persist two sellers and an admin; return the sellers."""
    for user in (seller_a, seller_b, admin):
        await user_repo.save(user)
    return seller_a, seller_b
