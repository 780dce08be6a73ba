from mercato.domain.catalog.services.access_policy import (
    DenialKind,
    ListingScope,
    PolicyDecision,
    ProductOperation,
    apply_scope,
    decide,
    enforce,
    listing_scope,
)

__all__ = [
    "DenialKind",
    "ListingScope",
    "PolicyDecision",
    "ProductOperation",
    "apply_scope",
    "decide",
    "enforce",
    "listing_scope",
]
