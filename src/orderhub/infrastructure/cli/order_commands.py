"""CLI commands for orders."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from orderhub.application.dto import NewOrderSpec, OrderItemSpec
from orderhub.domain.exceptions import DomainException
from orderhub.domain.result import Err
from orderhub.infrastructure.bootstrap import AppContext


def _parse_amount(raw: str, label: str) -> Decimal:
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid {label} '{raw}'.")
    if not amount.is_finite():
        raise click.BadParameter(f"Invalid {label} '{raw}'.")
    return amount


def _parse_item(raw: str) -> OrderItemSpec:
    """Parse 'PRODUCT_ID:QTY:PRICE' (e.g. '9:2:15.00') into an OrderItemSpec."""
    parts = raw.strip().split(":")
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductId:Qty:Price'."
        )
    product_str, qty_str, price_str = parts
    try:
        product_id = int(product_str)
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(f"Invalid product id or quantity in '{raw}'.")
    price = _parse_amount(price_str, "price")
    return OrderItemSpec(product_id=product_id, qty=qty, price=price)


@click.command("create")
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID.")
@click.option("--total", required=True, help="Order total (e.g. 30.00).")
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Line item as 'ProductId:Qty:Price'. Repeatable.",
)
@click.pass_obj
def order_create(obj: dict, user_id: int, total: str, items: tuple[str, ...]) -> None:
    """Create an order with its line items."""
    context: AppContext = obj["context"]
    spec = NewOrderSpec(
        user_id=user_id,
        total=_parse_amount(total, "total"),
        items=[_parse_item(raw) for raw in items],
    )

    try:
        order_id = context.create_order.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} created  (items={len(spec.items)})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(obj: dict, order_id: int) -> None:
    """Show an order with its owner and line items."""
    context: AppContext = obj["context"]

    try:
        dto = context.show_order.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id}  (status={dto.status})")
    click.echo(f"User:  {dto.user or '-'}")
    click.echo(f"Total: {dto.total}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*27}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<10} {item.qty:>5} {item.price:>10}")


@click.command("list")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
def order_list(obj: dict, user_id: int) -> None:
    """List the orders placed by a user."""
    context: AppContext = obj["context"]
    orders = context.list_user_orders.handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Total':>10} {'Status':<12}")
    click.echo("-" * 30)
    for o in orders:
        click.echo(f"{o.id:<6} {o.total:>10} {o.status:<12}")


def _report(outcome, order_id: int) -> None:
    if isinstance(outcome, Err):
        raise click.ClickException(outcome.message)
    click.echo(f"Order #{order_id} is now {outcome.value.status}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("new_status")
@click.pass_obj
def order_status(obj: dict, order_id: int, new_status: str) -> None:
    """Set an order's status (NEW, PROCESSING, COMPLETED, CANCELLED)."""
    context: AppContext = obj["context"]

    try:
        outcome = context.order_status.update_status(order_id, new_status.upper())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome, order_id)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(obj: dict, order_id: int) -> None:
    """Cancel an order (not allowed once completed)."""
    context: AppContext = obj["context"]

    try:
        outcome = context.order_status.cancel(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome, order_id)


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
@click.pass_obj
def order_complete(obj: dict, order_id: int) -> None:
    """Mark an order completed (not allowed once cancelled)."""
    context: AppContext = obj["context"]

    try:
        outcome = context.order_status.complete(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(outcome, order_id)
