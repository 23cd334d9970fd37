"""WorkSync CLI application using Typer.

Command-line utilities for running and maintaining the WorkSync backend:
secret generation, database setup, legacy day migration, demo data and
the API server.
"""

import asyncio
import logging
import secrets
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from worksync.application.commands import MigrateDayFormatsCommand
from worksync.application.context import CallerContext
from worksync.application.dtos import DayMigrationReport
from worksync.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
    display_url,
)
from worksync.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from worksync_config.settings import get_settings

app = typer.Typer(
    name="worksync",
    help="WorkSync - shift scheduling backend CLI",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database maintenance",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for WorkSync configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]WorkSync Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

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


async def _init_database() -> None:
    engine = create_engine_from_settings()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _migrate_days() -> DayMigrationReport:
    engine = create_engine_from_settings()
    try:
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            command = MigrateDayFormatsCommand.from_factory(
                factory,
                CallerContext.system(),
            )
            report = await command.execute()
            await session.commit()
            return report
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create all database tables (idempotent)."""
    settings = get_settings()
    console.print(f"Database: [bold]{display_url(settings.database_url)}[/bold]")
    asyncio.run(_init_database())
    console.print("[green]Database schema is up to date[/green]")


@db_app.command("migrate-days")
def db_migrate_days() -> None:
    """Rewrite legacy DD.MM.YYYY shift days to YYYY-MM-DD."""
    report = asyncio.run(_migrate_days())

    table = Table(title="Day format migration")
    table.add_column("Result")
    table.add_column("Shifts", justify="right")
    table.add_row("Converted", str(report.converted))
    table.add_row("Removed (unreadable)", str(report.removed))
    console.print(table)


@app.command("seed-demo")
def seed_demo() -> None:
    """Create a demo team with two shifts (only on an empty database)."""
    from worksync_demo.seed import main as seed_main

    stats = seed_main()
    if stats.skipped:
        console.print("[yellow]Users already exist, nothing seeded[/yellow]")
        return
    console.print(
        f"[green]Seeded {len(stats.user_ids)} users and "
        f"{stats.shifts_created} shifts[/green]"
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "worksync.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
