"""TechCare CLI application using Typer.

Command-line utilities for operating the TechCare backend: secret
generation, database setup, bootstrapping the first admin and running the
API server.
"""

import asyncio
import secrets
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="techcare",
    help="TechCare - technician booking backend CLI",
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
admin_app = typer.Typer(
    name="admin",
    help="Admin account management",
    no_args_is_help=True,
)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(admin_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for TechCare configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing bearer tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]TechCare Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes is well above the HS256 key size
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def init_database(
    reset: bool = typer.Option(
        False,
        "--reset",
        help="Drop all tables before creating them (destroys data)",
    ),
) -> None:
    """Create any missing tables."""
    from techcare.presentation.api.dependencies import (
        create_tables,
        drop_tables,
        get_engine,
    )

    if reset and not typer.confirm("Drop all TechCare tables?", default=False):
        raise typer.Abort

    async def _run() -> None:
        try:
            if reset:
                await drop_tables()
            await create_tables()
        finally:
            await get_engine().dispose()

    asyncio.run(_run())
    console.print("[green]Database schema is up to date.[/green]")


@admin_app.command("create")
def create_admin(
    email: str = typer.Option(..., prompt=True),
    full_name: str = typer.Option(..., prompt=True),
    phone_number: str = typer.Option(..., prompt=True),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
    image: Optional[str] = typer.Option(None, help="Profile image URL"),
) -> None:
    """Create an admin account directly in the database."""
    from techcare.domain.shared.exceptions import DomainException
    from techcare.presentation.api.dependencies import get_engine, get_session_maker
    from techcare_auth import AuthError, PasswordHashingService
    from techcare_config import get_settings
    from techcare_identity import SignUpAdminCommand
    from techcare_identity.infrastructure.persistence.sqlalchemy import (
        AdminRepositorySQLAlchemy,
    )

    settings = get_settings()

    async def _run():
        try:
            async with get_session_maker()() as session:
                command = SignUpAdminCommand(
                    admin_repository=AdminRepositorySQLAlchemy(session),
                    password_service=PasswordHashingService(
                        rounds=settings.password_hash_rounds,
                    ),
                )
                admin = await command.execute(
                    full_name=full_name,
                    email=email,
                    phone_number=phone_number,
                    password=password,
                    image=image,
                )
                await session.commit()
                return admin
        finally:
            await get_engine().dispose()

    try:
        admin = asyncio.run(_run())
    except (DomainException, AuthError) as e:
        console.print(f"[red]Could not create admin:[/red] {e.message}")
        raise typer.Exit(code=1) from e

    table = Table(title="Admin created", show_header=False)
    table.add_row("ID", str(admin.id))
    table.add_row("Email", admin.email)
    table.add_row("Name", admin.full_name)
    console.print(table)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    from techcare_config import get_settings

    settings = get_settings()
    uvicorn.run(
        "techcare.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
