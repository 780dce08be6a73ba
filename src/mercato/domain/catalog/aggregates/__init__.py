from mercato.domain.catalog.aggregates.product import Product

__all__ = ["Product"]
