"""SQLAlchemy models for mercato_auth."""

from mercato_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["UserCredentialModel"]
