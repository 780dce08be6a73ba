"""User domain exceptions."""

from uuid import UUID

from mercato.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email {email} is already registered",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found by id or email."""

    def __init__(self, identifier: str | UUID) -> None:
        self.identifier = str(identifier)
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"identifier": self.identifier},
        )


class RoleNotAllowedError(ForbiddenError):
    """The requested role cannot be self-assigned on this path."""

    def __init__(self, role: str) -> None:
        super().__init__(
            f"Role '{role}' cannot be assigned during registration",
            code=ErrorCode.ROLE_NOT_ALLOWED,
            details={"role": role},
        )
