"""Seller summary carried on product reads."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class SellerInfo:
    id: UUID
    email: str
    name: Optional[str] = None
