"""Paginated product listing result."""

from dataclasses import dataclass, field

from mercato.domain.catalog import PageMeta, Product


@dataclass(frozen=True)
class ProductPage:
    meta: PageMeta
    data: list[Product] = field(default_factory=list)
