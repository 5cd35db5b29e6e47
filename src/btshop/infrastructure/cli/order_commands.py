"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from btshop.application.change_order_status import ChangeOrderStatusHandler
from btshop.application.dto import OrderDTO
from btshop.application.show_order import ListOrdersHandler, ShowOrderHandler
from btshop.domain.exceptions import DomainException
from btshop.domain.model.order import OrderStatus
from btshop.infrastructure.bootstrap import order_repository, product_repository


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id} {dto.order_number}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}, {dto.phone}")
    if dto.address:
        click.echo(f"Delivery: {dto.delivery_type}, {dto.address}")
    else:
        click.echo(f"Delivery: {dto.delivery_type}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Subtotal':<34} {dto.subtotal:>29}")
    click.echo(f"  {'Delivery':<34} {dto.delivery_fee:>29}")
    click.echo(f"  {'Order Total':<34} {dto.total:>29}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_show(order_id: int) -> None:
    """Display an order's details."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id=order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders, newest first."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Number':<24} {'Customer':<20} {'Status':<11} {'Total':>14}")
    click.echo("-" * 78)
    for o in orders:
        click.echo(
            f"{o.id:<5} {o.order_number:<24} {o.customer_name:<20} "
            f"{o.status:<11} {o.total:>14}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("status", type=click.Choice([s.value for s in OrderStatus]))
def order_status(order_id: int, status: str) -> None:
    """Move an order to a new status (cancelling returns stock)."""
    handler = ChangeOrderStatusHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(order_id=order_id, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status}")
