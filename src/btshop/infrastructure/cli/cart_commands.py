"""CLI commands for the shopping cart and checkout."""

from __future__ import annotations

import click

from btshop.application.add_to_cart import AddToCartHandler
from btshop.application.checkout import CheckoutHandler
from btshop.application.dto import CartDTO
from btshop.application.show_cart import ShowCartHandler
from btshop.application.update_cart import (
    ChangeCartQuantityHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
)
from btshop.domain.exceptions import DomainException
from btshop.domain.model.order import DeliveryType
from btshop.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    product_repository,
)
from btshop.infrastructure.cli.order_commands import display_order


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*71}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.name:<28} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*71}")
    click.echo(f"  {f'Subtotal ({dto.item_count} pcs)':<41} {dto.subtotal:>30}")


@click.command("show")
def cart_show() -> None:
    """Show the cart."""
    _display_cart(ShowCartHandler(cart_repo=cart_repository()).handle())


@click.command("add")
@click.argument("product_id")
@click.option("--quantity", type=int, default=1, show_default=True)
def cart_add(product_id: str, quantity: int) -> None:
    """Put a product in the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("set")
@click.argument("product_id")
@click.argument("quantity", type=int)
def cart_set(product_id: str, quantity: int) -> None:
    """Change a cart line's quantity (0 removes it)."""
    handler = ChangeCartQuantityHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.argument("product_id")
def cart_remove(product_id: str) -> None:
    """Take a product out of the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle()
    click.echo("Cart cleared.")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Contact phone.")
@click.option(
    "--delivery",
    type=click.Choice([t.value for t in DeliveryType]),
    default=DeliveryType.PICKUP.value,
    show_default=True,
)
@click.option("--address", default=None, help="Courier delivery address.")
def checkout(customer: str, phone: str, delivery: str, address: str | None) -> None:
    """Place an order for everything in the cart."""
    handler = CheckoutHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        order_repo=order_repository(),
    )

    try:
        dto = handler.handle(
            customer_name=customer,
            phone=phone,
            delivery_type=delivery,
            address=address,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
