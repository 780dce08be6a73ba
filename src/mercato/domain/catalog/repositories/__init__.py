from mercato.domain.catalog.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
