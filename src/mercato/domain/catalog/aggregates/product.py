"""Product aggregate."""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID, uuid4

from mercato.domain.catalog.value_objects import (
    NewProduct,
    ProductChanges,
    SellerInfo,
    Sku,
    normalize_name,
    normalize_price,
    normalize_quantity,
)
from mercato.domain.shared.time import utc_now


class Product:
    """
    Product aggregate root.

    A product belongs to exactly one seller for its whole life: the seller
    is set at creation and there is no method that reassigns it.

    Invariants
    ----------
    - name is trimmed and 2-255 characters
    - sku is normalized (trimmed, uppercased) and matches the SKU pattern
    - price is a positive Decimal with two decimal places
    - quantity is a non-negative integer
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        sku: Union[str, Sku],
        price: Union[Decimal, str, int, float],
        seller_id: UUID,
        quantity: int = 0,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        seller: Optional[SellerInfo] = None,
    ):
        self._id = id or uuid4()
        self._name = normalize_name(name)
        self._sku = sku if isinstance(sku, Sku) else Sku(sku)
        self._price = normalize_price(price)
        self._quantity = normalize_quantity(quantity)
        self._seller_id = seller_id
        self._seller = seller
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def sku(self) -> str:
        return self._sku.value

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def seller_id(self) -> UUID:
        return self._seller_id

    @property
    def seller(self) -> Optional[SellerInfo]:
        """Seller summary, present when loaded from the store."""
        return self._seller

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._seller_id == user_id

    def apply_changes(self, changes: ProductChanges) -> None:
        """Merge a partial update; fields left as ``None`` are kept.

        All values are validated before any field is assigned, so a failed
        update leaves the product untouched.
        """
        if changes.is_empty():
            return

        name = self._name if changes.name is None else normalize_name(changes.name)
        sku = self._sku if changes.sku is None else Sku(changes.sku)
        price = (
            self._price if changes.price is None else normalize_price(changes.price)
        )
        quantity = (
            self._quantity
            if changes.quantity is None
            else normalize_quantity(changes.quantity)
        )

        self._name = name
        self._sku = sku
        self._price = price
        self._quantity = quantity
        self._updated_at = utc_now()

    @classmethod
    def create(cls, data: NewProduct, seller: SellerInfo) -> "Product":
        return cls(
            name=data.name,
            sku=data.sku,
            price=data.price,
            quantity=data.quantity,
            seller_id=seller.id,
            seller=seller,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        sku: str,
        price: Decimal,
        quantity: int,
        seller_id: UUID,
        created_at: datetime,
        updated_at: datetime,
        seller: Optional[SellerInfo] = None,
    ) -> "Product":
        return cls(
            id=id,
            name=name,
            sku=sku,
            price=price,
            quantity=quantity,
            seller_id=seller_id,
            created_at=created_at,
            updated_at=updated_at,
            seller=seller,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Product(id={self._id}, sku={self.sku}, seller_id={self._seller_id})"
