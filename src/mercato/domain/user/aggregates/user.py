"""User aggregate for marketplace identities."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from mercato.domain.shared.time import utc_now
from mercato.domain.user.value_objects import UserRole
from mercato.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds the public identity of a marketplace participant. The role is
    fixed at creation; there is no operation that changes it.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        name: str | None = None,
        role: Union[str, UserRole] = UserRole.CLIENT,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = (name.strip() or None) if name else None
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_seller(self) -> bool:
        return self._role == UserRole.SELLER

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str | None = None,
        role: UserRole = UserRole.CLIENT,
    ) -> "User":
        return cls(email=email, name=name, role=role)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str | None,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email.value}, "
            f"role={self._role.value})"
        )
