"""SQLAlchemy repository implementations."""

from mercato.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    ProductRepositorySQLAlchemy,
)
from mercato.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ProductRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
