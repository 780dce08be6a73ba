"""SQLAlchemy declarative base for mercato_auth models.

This provides a separate Base for auth models. The consuming application
must create ``AuthBase.metadata`` alongside its own metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for mercato_auth models."""
