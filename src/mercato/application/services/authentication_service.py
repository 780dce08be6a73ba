"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from mercato.domain.user import (
    EmailAlreadyExistsError,
    RoleNotAllowedError,
    User,
    UserNotFoundError,
    UserRole,
)
from mercato.domain.user.value_objects import Email
from mercato_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from mercato_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from mercato.domain.user import UserRepository

logger = logging.getLogger(__name__)

PUBLIC_ROLES = frozenset({UserRole.CLIENT, UserRole.SELLER})


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates mercato_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Credential validation and login
    - Token verification for authenticated requests

    Unknown emails raise UserNotFoundError while a wrong password for a
    known email raises InvalidCredentialsError; the two are distinguishable.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            name=user.name,
        )

    async def register(  # noqa: PLR0913
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
        role: Union[str, UserRole] = UserRole.CLIENT,
        allow_admin: bool = False,
    ) -> tuple[User, str]:
        """
        Register a new user and issue an access token.

        Parameters
        ----------
        email
            Email address; normalized before the uniqueness check
        password
            Plaintext password, 6-50 characters
        name
            Optional display name
        role
            Requested role, client by default
        allow_admin
            Only the provisioning CLI passes True; the public path can
            never create admins

        Raises
        ------
        RoleNotAllowedError
            If an admin is requested without ``allow_admin``
        EmailAlreadyExistsError
            If the email is already registered
        WeakPasswordError
            If the password length is out of bounds
        """
        role = role if isinstance(role, UserRole) else UserRole(role)
        if role not in PUBLIC_ROLES and not allow_admin:
            raise RoleNotAllowedError(role.value)

        normalized = Email(email)
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        password_hash = self._password_service.hash(password)
        user = User.create(normalized, name=name, role=role)
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        logger.info("User registered: %s (role: %s)", user.email, role.value)
        return user, self._issue_token(user)

    async def validate(self, email: str, password: str) -> Optional[User]:
        """
        Check a password against the stored credential.

        Returns
        -------
        The user on a match, None on a wrong password

        Raises
        ------
        UserNotFoundError
            If no user has this email
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            logger.warning("User %s has no stored credential", user.id)
            return None

        if not self._password_service.verify(password, credential.password_hash):
            return None
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self.validate(email, password)
        if user is None:
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)

        logger.info("User logged in: %s", user.email)
        return user, self._issue_token(user)

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
