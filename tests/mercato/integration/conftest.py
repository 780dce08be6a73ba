"""Fixtures for integration tests against SQLite (aiosqlite).

Foreign keys are switched on per connection so ON DELETE CASCADE behaves
like PostgreSQL.
"""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def _create_sqlite_engine(url: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(url, echo=False, **kwargs)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


@pytest.fixture
def sqlite_engine_factory():
    """Build aiosqlite engines with foreign keys enforced."""
    return _create_sqlite_engine
