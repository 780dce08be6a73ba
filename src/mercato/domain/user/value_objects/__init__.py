"""Value objects for the user domain."""

from mercato.domain.user.value_objects.email import Email
from mercato.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserRole",
]
