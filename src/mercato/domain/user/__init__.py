"""User domain manages marketplace identities.

This domain handles:
- User aggregate (id, email, name, role)
- Email normalization and uniqueness contract
- Role model (seller / admin / client)

Password hashes live in mercato_auth's credential store and never
appear on the aggregate.
"""

from mercato.domain.user.aggregates import User
from mercato.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    RoleNotAllowedError,
    UserNotFoundError,
)
from mercato.domain.user.repositories import UserRepository
from mercato.domain.user.value_objects import Email, UserRole

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "RoleNotAllowedError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
