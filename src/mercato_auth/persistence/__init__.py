"""Persistence implementations for mercato_auth.

Only SQLAlchemy is provided:

    from mercato_auth.persistence.sqlalchemy import (
        AuthBase,
        UserCredentialRepositorySQLAlchemy,
    )
"""
