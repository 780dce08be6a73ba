"""Access policy for product operations.

Role dispatch is a decision table keyed by operation. Each rule looks at the
acting user (possibly anonymous) and, for mutations, the target product.

    CREATE      seller only
    READ        anyone
    READ_MANY   anyone; sellers see only their own products, admins may
                also search by seller name/email
    UPDATE      the owning seller only
    DELETE      the owning seller only

The functions here are pure; they never touch the store. Callers load the
resource first so that a missing product is reported as not found before
ownership is evaluated.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional
from uuid import UUID

from mercato.domain.catalog.aggregates import Product
from mercato.domain.catalog.exceptions import (
    ProductAccessDeniedError,
    ProductNotFoundError,
)
from mercato.domain.catalog.value_objects import ProductSearchCriteria
from mercato.domain.shared.exceptions import DomainException, ErrorCode
from mercato.domain.user import User, UserRole

logger = logging.getLogger(__name__)


class ProductOperation(str, Enum):
    CREATE = "create"
    READ = "read"
    READ_MANY = "read_many"
    UPDATE = "update"
    DELETE = "delete"


class DenialKind(str, Enum):
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of a policy check.

    ``error`` builds the exception the caller should raise when the
    decision is a denial.
    """

    allowed: bool
    denial: Optional[DenialKind] = None
    reason: str = ""
    code: ErrorCode = ErrorCode.FORBIDDEN
    product_id: Optional[UUID] = None

    @classmethod
    def allow(cls) -> "PolicyDecision":
        return cls(allowed=True)

    @classmethod
    def forbid(
        cls,
        reason: str,
        code: ErrorCode = ErrorCode.FORBIDDEN,
    ) -> "PolicyDecision":
        return cls(
            allowed=False,
            denial=DenialKind.FORBIDDEN,
            reason=reason,
            code=code,
        )

    @classmethod
    def not_found(cls) -> "PolicyDecision":
        return cls(
            allowed=False,
            denial=DenialKind.NOT_FOUND,
            reason="Product not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
        )

    def error(self) -> DomainException:
        if self.denial == DenialKind.NOT_FOUND:
            return ProductNotFoundError(self.product_id)
        return ProductAccessDeniedError(self.reason, code=self.code)


@dataclass(frozen=True)
class ListingScope:
    """Restrictions the policy adds to a product listing."""

    seller_id: Optional[UUID] = None
    search_seller_fields: bool = False


def _allow_anyone(
    actor: Optional[User],
    resource: Optional[Product],
) -> PolicyDecision:
    return PolicyDecision.allow()


def _require_seller(
    actor: Optional[User],
    resource: Optional[Product],
) -> PolicyDecision:
    if actor is None:
        return PolicyDecision.forbid("Authentication required")
    if not actor.is_seller:
        return PolicyDecision.forbid("Only sellers can create products")
    return PolicyDecision.allow()


def _require_owner(
    actor: Optional[User],
    resource: Optional[Product],
) -> PolicyDecision:
    if resource is None:
        return PolicyDecision.not_found()
    if actor is None:
        return PolicyDecision.forbid("Authentication required")
    if not actor.is_seller:
        return PolicyDecision.forbid("Only sellers can modify products")
    if not resource.is_owned_by(actor.id):
        return PolicyDecision.forbid(
            "You can only modify your own products",
            code=ErrorCode.NOT_PRODUCT_OWNER,
        )
    return PolicyDecision.allow()


_Rule = Callable[[Optional[User], Optional[Product]], PolicyDecision]

_RULES: dict[ProductOperation, _Rule] = {
    ProductOperation.CREATE: _require_seller,
    ProductOperation.READ: _allow_anyone,
    ProductOperation.READ_MANY: _allow_anyone,
    ProductOperation.UPDATE: _require_owner,
    ProductOperation.DELETE: _require_owner,
}


def decide(
    actor: Optional[User],
    operation: ProductOperation,
    resource: Optional[Product] = None,
    product_id: Optional[UUID] = None,
) -> PolicyDecision:
    """Evaluate the rule for ``operation`` without raising.

    ``product_id`` is the id the caller looked up; it identifies the
    target when ``resource`` is missing.
    """
    decision = _RULES[operation](actor, resource)
    if resource is not None:
        product_id = resource.id
    if decision.allowed or product_id is None:
        return decision
    return replace(decision, product_id=product_id)


def enforce(
    actor: Optional[User],
    operation: ProductOperation,
    resource: Optional[Product] = None,
    product_id: Optional[UUID] = None,
) -> None:
    """
    Raise if ``actor`` may not perform ``operation`` on ``resource``.

    Raises
    ------
    ProductNotFoundError
        If a mutation targets a missing product
    ProductAccessDeniedError
        If the role or ownership check fails
    """
    decision = decide(actor, operation, resource, product_id)
    if decision.allowed:
        return

    logger.warning(
        "Denied %s on product %s for user %s: %s",
        operation.value,
        decision.product_id,
        actor.id if actor else "anonymous",
        decision.reason,
    )
    raise decision.error()


def listing_scope(actor: Optional[User]) -> ListingScope:
    if actor is None:
        return ListingScope()
    if actor.role == UserRole.SELLER:
        return ListingScope(seller_id=actor.id)
    if actor.role == UserRole.ADMIN:
        return ListingScope(search_seller_fields=True)
    return ListingScope()


def apply_scope(
    criteria: ProductSearchCriteria,
    actor: Optional[User],
) -> ProductSearchCriteria:
    """Add the actor's listing restrictions to ``criteria``.

    An ownership restriction already present on ``criteria`` is kept when
    the actor is not a seller. For a seller the actor's own id always wins.
    """
    scope = listing_scope(actor)
    if scope.seller_id is not None:
        criteria = criteria.restricted_to_seller(scope.seller_id)
    if scope.search_seller_fields:
        criteria = criteria.with_seller_search()
    return criteria
