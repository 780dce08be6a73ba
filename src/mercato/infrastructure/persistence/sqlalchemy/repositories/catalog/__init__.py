"""SQLAlchemy repository implementations for catalog domain."""

from mercato.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (  # NOQA: E501
    ProductRepositorySQLAlchemy,
)

__all__ = ["ProductRepositorySQLAlchemy"]
