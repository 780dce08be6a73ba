"""Data transfer objects returned by application services."""

from mercato.application.dtos.product_page import ProductPage

__all__ = ["ProductPage"]
