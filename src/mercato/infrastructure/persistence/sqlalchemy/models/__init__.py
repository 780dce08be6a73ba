"""SQLAlchemy models for persistence layer."""

from mercato.infrastructure.persistence.sqlalchemy.models.base import Base
from mercato.infrastructure.persistence.sqlalchemy.models.catalog import (
    ProductModel,
)
from mercato.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "ProductModel",
    "UserModel",
]
