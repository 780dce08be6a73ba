"""SQLAlchemy implementation for mercato_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation
"""

from mercato_auth.persistence.sqlalchemy.base import AuthBase
from mercato_auth.persistence.sqlalchemy.models import UserCredentialModel
from mercato_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
