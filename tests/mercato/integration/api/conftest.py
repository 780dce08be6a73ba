"""Pytest fixtures for API integration tests.

Each test gets a file-backed SQLite database under ``tmp_path``. The engine
uses NullPool so connections are never reused across the event loops that
TestClient and the setup helpers run in.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from mercato.application.services import AuthenticationService
from mercato.domain.user import UserRole
from mercato.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from mercato.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from mercato.presentation.api.app import API_V1_PREFIX, create_app
from mercato.presentation.api.config import get_api_settings
from mercato.presentation.api.dependencies import get_db_session
from mercato_auth import JWTService, PasswordHashingService
from mercato_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from mercato_config.settings import Settings

TEST_JWT_SECRET = "api-test-jwt-secret-0123456789-abcdefghij"
TEST_PASSWORD = "secret123"
ADMIN_EMAIL = "root@example.com"


def _run(coro) -> None:
    """Run a coroutine in a fresh event loop, away from TestClient's loop."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with cheap bcrypt rounds."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        postgres_password=SecretStr("test-password"),
        database_url_override=database_url,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


@pytest.fixture
def async_engine(sqlite_engine_factory, database_url):
    engine = sqlite_engine_factory(database_url, poolclass=NullPool)
    _run(create_tables(engine))
    yield engine
    _run(drop_tables(engine))
    _run(engine.dispose())


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def test_client(api_settings, session_maker):
    """Create a test client wired to the per-test SQLite database.

    The lifespan is not entered, so tables come from ``async_engine``.
    """
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def register_user(test_client, api_v1_prefix):
    """Register through the API and return ``(user, headers)``."""

    def _register(email: str, role: str = "client", name: str | None = None):
        payload = {"email": email, "password": TEST_PASSWORD, "role": role}
        if name is not None:
            payload["name"] = name
        response = test_client.post(f"{api_v1_prefix}/auth/register", json=payload)
        assert response.status_code == 201, (
            f"Registration failed: {response.status_code} - {response.text}"
        )
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['access_token']}"}

    return _register


@pytest.fixture
def seller_a(register_user):
    return register_user("alice@example.com", role="seller", name="Alice")


@pytest.fixture
def seller_b(register_user):
    return register_user("bruno@example.com", role="seller", name="Bruno")


@pytest.fixture
def client_user(register_user):
    return register_user("carla@example.com", name="Carla")


@pytest.fixture
def admin_user(test_client, api_settings, session_maker, api_v1_prefix):
    """Provision an admin the way the CLI does, then log in over the API."""

    async def _create_admin():
        async with session_maker() as session:
            service = AuthenticationService(
                user_repository=UserRepositorySQLAlchemy(session),
                credential_repository=UserCredentialRepositorySQLAlchemy(session),
                password_service=PasswordHashingService(rounds=4),
                jwt_service=JWTService(
                    secret_key=api_settings.jwt_secret_key.get_secret_value(),
                ),
            )
            await service.register(
                email=ADMIN_EMAIL,
                password=TEST_PASSWORD,
                name="Root",
                role=UserRole.ADMIN,
                allow_admin=True,
            )
            await session.commit()

    _run(_create_admin())

    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": ADMIN_EMAIL, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, response.text
    data = response.json()
    return data["user"], {"Authorization": f"Bearer {data['access_token']}"}


@pytest.fixture
def create_product(test_client, api_v1_prefix):
    """POST a product as the given seller and return the response JSON."""

    def _create(headers, sku, name="Widget", price="10.00", quantity=1):
        response = test_client.post(
            f"{api_v1_prefix}/products",
            json={"name": name, "sku": sku, "price": price, "quantity": quantity},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
