"""Integration tests for the mercato CLI against a file-backed SQLite database."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from typer.testing import CliRunner

from mercato.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from mercato.presentation.cli.app import app
from mercato_config import clear_settings_cache

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture
def database_url(tmp_path, monkeypatch) -> str:
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", url)
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    clear_settings_cache()
    yield url
    clear_settings_cache()


def _load_user(url: str, email: str):
    async def _load():
        engine = create_async_engine(url)
        try:
            session_maker = async_sessionmaker(engine, class_=AsyncSession)
            async with session_maker() as session:
                return await UserRepositorySQLAlchemy(session).find_by_email(email)
        finally:
            await engine.dispose()

    return asyncio.run(_load())


class TestUsersCreate:
    def test_creates_admin(self, database_url):
        result = runner.invoke(
            app,
            [
                "users",
                "create",
                "Root@Example.com",
                "--name",
                "Root",
                "--role",
                "admin",
                "--password",
                "secret123",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "root@example.com" in result.output
        user = _load_user(database_url, "root@example.com")
        assert user is not None
        assert user.is_admin

    def test_duplicate_email_fails(self, database_url):
        args = ["users", "create", "dup@example.com", "--password", "secret123"]
        assert runner.invoke(app, args).exit_code == 0

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_weak_password_fails(self, database_url):
        result = runner.invoke(
            app,
            ["users", "create", "weak@example.com", "--password", "123"],
        )

        assert result.exit_code == 1

    def test_password_over_bcrypt_limit_fails(self, database_url):
        result = runner.invoke(
            app,
            ["users", "create", "emoji@example.com", "--password", "\N{KEY}" * 20],
        )

        assert result.exit_code == 1
        assert "72 bytes" in result.output


def test_db_init_creates_schema(database_url):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert _load_user(database_url, "nobody@example.com") is None


def test_secrets_generate():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET_KEY=" in result.output
    assert "POSTGRES_PASSWORD=" in result.output
