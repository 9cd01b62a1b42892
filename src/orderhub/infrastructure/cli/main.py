import click

from orderhub.infrastructure.bootstrap import build_context
from orderhub.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_show,
    order_status,
)
from orderhub.infrastructure.cli.user_commands import (
    user_create,
    user_list,
    user_set_email,
    user_show,
)
from orderhub.infrastructure.config import Settings
from orderhub.infrastructure.logger import configure_logging


@click.group()
@click.option(
    "--backend",
    type=click.Choice(["json", "sql"]),
    default=None,
    help="Storage backend (overrides ORDERHUB_STORAGE_BACKEND).",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Data directory (overrides ORDERHUB_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, backend: str | None, data_dir: str | None) -> None:
    """orderhub — users, orders and order items"""
    overrides: dict = {}
    if backend is not None:
        overrides["storage_backend"] = backend
    if data_dir is not None:
        overrides["data_dir"] = data_dir

    settings = Settings(**overrides)
    configure_logging(settings.log_level, settings.log_format)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["context"] = build_context(settings)


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", default=None, type=int, help="Port (default from settings).")
@click.pass_obj
def serve(obj: dict, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from orderhub.infrastructure.http.app import create_app

    settings: Settings = obj["settings"]
    app = create_app(obj["context"])
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


# Register subcommands
user.add_command(user_create)
user.add_command(user_list)
user.add_command(user_show)
user.add_command(user_set_email)
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_status)
order.add_command(order_cancel)
order.add_command(order_complete)
