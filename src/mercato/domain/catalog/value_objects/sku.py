"""SKU value object."""

import re
from dataclasses import dataclass

from mercato.domain.catalog.exceptions import InvalidSkuError

SKU_PATTERN = re.compile(r"^[A-Z0-9_-]+$")
SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 100


@dataclass(frozen=True)
class Sku:
    """Stock-keeping unit, trimmed and uppercased on construction.

    Normalization is idempotent: ``Sku(Sku("abc-1").value) == Sku("abc-1")``.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidSkuError("SKU cannot be empty", self.value)

        normalized = self.value.strip().upper()

        if not SKU_MIN_LENGTH <= len(normalized) <= SKU_MAX_LENGTH:
            msg = (
                f"SKU must be between {SKU_MIN_LENGTH} and "
                f"{SKU_MAX_LENGTH} characters"
            )
            raise InvalidSkuError(msg, self.value)

        if not SKU_PATTERN.match(normalized):
            msg = (
                "SKU must contain only uppercase letters, numbers, "
                "hyphens, and underscores"
            )
            raise InvalidSkuError(msg, self.value)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
