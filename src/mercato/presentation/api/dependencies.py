"""FastAPI dependency injection for the Mercato API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mercato.application.services import AuthenticationService, ProductCatalogService
from mercato.domain.shared.exceptions import ErrorCode, UnauthorizedError
from mercato.domain.user import User
from mercato.infrastructure.persistence.sqlalchemy.repositories import (
    ProductRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from mercato.presentation.api.config import get_api_settings
from mercato_auth import InvalidTokenError, JWTService, PasswordHashingService
from mercato_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from mercato_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_api_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Each request gets its own session; nothing is shared between requests.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service wired to the request's session."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_product_catalog_service(session: DBSession) -> ProductCatalogService:
    return ProductCatalogService(
        product_repository=ProductRepositorySQLAlchemy(session),
    )


CatalogService = Annotated[
    ProductCatalogService,
    Depends(get_product_catalog_service),
]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    UnauthorizedError
        If the token is missing, invalid, expired, or its user is gone
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise UnauthorizedError(
            "Invalid or expired token",
            code=ErrorCode.INVALID_TOKEN,
        ) from e

    if not payload.is_access_token():
        raise UnauthorizedError("Invalid token type", code=ErrorCode.INVALID_TOKEN)

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise UnauthorizedError("User not found", code=ErrorCode.INVALID_TOKEN)

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Optional[User]:
    """
    Optional authentication dependency.

    Returns the current user if a valid token is provided, None otherwise,
    so anonymous callers can still browse the catalog.
    """
    if credentials is None:
        return None

    try:
        return await get_current_user(credentials, session, jwt_service)
    except UnauthorizedError:
        return None


OptionalCurrentUser = Annotated[Optional[User], Depends(get_current_user_optional)]
