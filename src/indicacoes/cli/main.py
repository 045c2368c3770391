"""
Indicações CLI

Command-line interface for administration.

Commands:
- init-db: Create tables from the models (development only, use Alembic elsewhere)
- create-user: Register a staff user with a password
- set-cargo: Change a user's role
- status-options: Show the statuses a role may assign
- purge-sessions: Delete expired sessions
"""

from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from indicacoes.domain.enums import Cargo
from indicacoes.domain.status_por_cargo import get_status_por_cargo

app = typer.Typer(
    name="indicacoes",
    help="Indicações administration CLI",
)

console = Console()


def get_db():
    """Get database session."""
    from indicacoes.core.database import get_db as _get_db
    return next(_get_db())


def _parse_cargo(cargo: str) -> Cargo:
    try:
        return Cargo(cargo)
    except ValueError:
        valid = ", ".join(c.value for c in Cargo)
        rprint(f"[red]Invalid cargo: {cargo}. Use one of: {valid}[/red]")
        raise typer.Exit(1)


@app.command()
def init_db():
    """
    Create all tables that do not exist yet.
    """
    from indicacoes.core.database import Base, get_engine
    import indicacoes.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    rprint("[green]Tables created[/green]")


@app.command()
def create_user(
    email: str = typer.Argument(..., help="User email (login)"),
    name: str = typer.Argument(..., help="First name"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
    cargo: str = typer.Option(Cargo.VENDEDOR_INTERNO.value, help="Vendedor Interno, Vendedor Externo, Financeiro or Admin"),
    last_name: Optional[str] = typer.Option(None, help="Last name"),
):
    """
    Register a staff user who logs in with email and password.
    """
    from indicacoes.application.services.session_service import SessionService
    from indicacoes.persistence.repo import UserRepository

    cargo_enum = _parse_cargo(cargo)
    email = email.strip().lower()
    db = get_db()

    try:
        if UserRepository(db).get_by_email(email):
            rprint(f"[yellow]A user with email {email} already exists[/yellow]")
            raise typer.Exit(1)

        user = SessionService(db).create_staff_user(
            email=email,
            name=name,
            password=password,
            cargo=cargo_enum,
            last_name=last_name,
        )
        rprint(f"[green]User created:[/green] {user.id}")
        rprint(f"  Cargo: {user.job}")
        rprint(f"  Promo code: {user.promo_code}")
    finally:
        db.close()


@app.command()
def set_cargo(
    email: str = typer.Argument(..., help="User email"),
    cargo: str = typer.Argument(..., help="New role"),
):
    """
    Change the role of every account registered with an email (any letter case).
    """
    from indicacoes.persistence.repo import UserRepository

    cargo_enum = _parse_cargo(cargo)
    db = get_db()

    try:
        users = UserRepository(db).list_by_email(email.strip())
        if not users:
            rprint(f"[red]No user found for {email}[/red]")
            raise typer.Exit(1)

        for user in users:
            user.job = cargo_enum
        db.commit()
        rprint(f"[green]Updated {len(users)} account(s) to {cargo_enum.value}[/green]")
    finally:
        db.close()


@app.command()
def status_options(cargo: str = typer.Argument(..., help="Role name")):
    """
    Show the statuses a role may assign to a lead.
    """
    options = get_status_por_cargo(cargo)
    if not options:
        rprint(f"[yellow]No statuses configured for {cargo}[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Status - {cargo}")
    table.add_column("#", style="dim")
    table.add_column("Value")
    table.add_column("Label")
    for index, option in enumerate(options, start=1):
        table.add_row(str(index), option.value, option.label)
    console.print(table)


@app.command()
def purge_sessions():
    """
    Delete sessions that have already expired.
    """
    from indicacoes.core.security import utcnow
    from indicacoes.persistence.repo import UserRepository

    db = get_db()
    try:
        deleted = UserRepository(db).delete_expired_sessions(utcnow())
        db.commit()
        rprint(f"[green]Deleted {deleted} expired session(s)[/green]")
    finally:
        db.close()


if __name__ == "__main__":
    app()
