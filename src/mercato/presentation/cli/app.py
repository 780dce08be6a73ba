"""Mercato CLI application using Typer.

Command-line utilities for deployment and administration:
secret generation, schema creation and user provisioning. Provisioning
here is the only way to create admin accounts.
"""

import asyncio
import secrets
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mercato.application.services import AuthenticationService
from mercato.domain.shared.exceptions import DomainException
from mercato.domain.user import User, UserRole
from mercato.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
)
from mercato.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from mercato_auth import AuthError, JWTService, PasswordHashingService
from mercato_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from mercato_config.settings import get_settings

app = typer.Typer(
    name="mercato",
    help="Mercato - marketplace backend CLI",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
users_app = typer.Typer(
    name="users",
    help="User provisioning",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Mercato configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Mercato Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_db() -> None:
    engine = create_engine_from_settings()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables. Existing data is never touched."""
    url = get_settings().database_url
    console.print(f"Database: [cyan]{url.split('@')[-1]}[/cyan]")
    asyncio.run(_init_db())
    console.print("[green]Database schema is up to date.[/green]")


async def _create_user(
    email: str,
    password: str,
    name: Optional[str],
    role: UserRole,
) -> User:
    settings = get_settings()
    engine = create_engine_from_settings()
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            service = AuthenticationService(
                user_repository=UserRepositorySQLAlchemy(session),
                credential_repository=UserCredentialRepositorySQLAlchemy(session),
                password_service=PasswordHashingService(rounds=settings.bcrypt_rounds),
                jwt_service=JWTService(
                    secret_key=settings.jwt_secret_key.get_secret_value(),
                    access_token_expire_hours=settings.jwt_access_token_expire_hours,
                ),
            )
            try:
                user, _ = await service.register(
                    email=email,
                    password=password,
                    name=name,
                    role=role,
                    allow_admin=True,
                )
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        return user
    finally:
        await engine.dispose()


@users_app.command("create")
def create_user(
    email: str = typer.Argument(..., help="Email address of the new user"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name"),
    role: UserRole = typer.Option(UserRole.CLIENT, "--role", "-r", help="User role"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (6-50 characters)",
    ),
) -> None:
    """Provision a user. This is the only way to create admins."""
    try:
        user = asyncio.run(_create_user(email, password, name, role))
    except (DomainException, AuthError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title="User created", show_header=False)
    table.add_row("id", str(user.id))
    table.add_row("email", user.email)
    table.add_row("name", user.name or "-")
    table.add_row("role", user.role.value)
    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
