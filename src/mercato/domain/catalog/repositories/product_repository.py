"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from mercato.domain.catalog.aggregates import Product
from mercato.domain.catalog.value_objects import ProductSearchCriteria


class ProductRepository(ABC):
    """Repository interface for Product aggregates.

    Implementations must back SKU uniqueness with a unique constraint and
    raise SkuAlreadyExistsError when it is violated on save.
    """

    @abstractmethod
    async def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by its ID."""

    @abstractmethod
    async def find_by_sku(self, sku: str) -> Optional[Product]:
        """Find a product by its normalized SKU."""

    @abstractmethod
    async def search(
        self,
        criteria: ProductSearchCriteria,
    ) -> tuple[list[Product], int]:
        """
        Run a filtered, sorted, paginated listing.

        Returns
        -------
        The requested page of products and the total number of products
        matching the same predicates (ignoring offset and limit).
        """

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert or update a product and return it with its seller summary."""

    @abstractmethod
    async def delete(self, product_id: UUID) -> bool:
        """Hard-delete a product. Returns False if it did not exist."""
