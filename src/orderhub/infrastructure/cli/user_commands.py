"""CLI commands for users."""

from __future__ import annotations

import click

from orderhub.domain.exceptions import DomainException
from orderhub.infrastructure.bootstrap import AppContext


def _display_user(dto) -> None:
    click.echo(f"User #{dto.id}")
    click.echo(f"Name:  {dto.name or '-'}")
    click.echo(f"Email: {dto.email}")
    click.echo(f"Phone: {dto.phone or '-'}")


@click.command("create")
@click.option("--email", required=True, help="Email address.")
@click.option("--name", default=None, help="Display name.")
@click.option("--phone", default=None, help="Phone number.")
@click.pass_obj
def user_create(obj: dict, email: str, name: str | None, phone: str | None) -> None:
    """Register a new user."""
    context: AppContext = obj["context"]

    try:
        dto = context.create_user.handle(email=email, name=name, phone=phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{dto.id} created")


@click.command("list")
@click.pass_obj
def user_list(obj: dict) -> None:
    """List all users."""
    context: AppContext = obj["context"]
    users = context.list_users.handle()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<30} {'Phone':<15}")
    click.echo("-" * 74)
    for u in users:
        click.echo(f"{u.id:<6} {u.name or '-':<20} {u.email:<30} {u.phone or '-':<15}")


@click.command("show")
@click.option("--id", "user_id", required=True, type=int, help="User ID to display.")
@click.pass_obj
def user_show(obj: dict, user_id: int) -> None:
    """Show a single user."""
    context: AppContext = obj["context"]

    try:
        dto = context.show_user.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_user(dto)


@click.command("set-email")
@click.option("--id", "user_id", required=True, type=int, help="User ID.")
@click.option("--email", required=True, help="New email address.")
@click.pass_obj
def user_set_email(obj: dict, user_id: int, email: str) -> None:
    """Change a user's email address."""
    context: AppContext = obj["context"]

    try:
        context.update_user_email.handle(user_id, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} email updated to {email}")
