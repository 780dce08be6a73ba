from mercato.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (  # NOQA: E501
    ProductModel,
)

__all__ = ["ProductModel"]
