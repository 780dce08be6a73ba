"""Mercato Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the marketplace domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification
- User credential storage (with pluggable persistence)

Architecture:
    mercato_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from mercato_auth import PasswordHashingService, JWTService
    from mercato_auth.persistence.sqlalchemy import (
        UserCredentialRepositorySQLAlchemy,
        AuthBase,
    )
"""

from mercato_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from mercato_auth.repositories import UserCredentialData, UserCredentialRepository
from mercato_auth.schemas import TokenPayload
from mercato_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
