import logging

import click

from btshop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
    checkout,
)
from btshop.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_category_add,
    catalog_list,
    catalog_show,
)
from btshop.infrastructure.cli.order_commands import order_list, order_show, order_status
from btshop.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_discount,
    product_review,
    product_reviews,
    product_stock,
    product_undiscount,
    product_update,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """BT-Shop — home appliance storefront"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def product() -> None:
    """Manage products (back office)."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_category_add)
catalog.add_command(catalog_list)
catalog.add_command(catalog_show)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_discount)
product.add_command(product_review)
product.add_command(product_reviews)
product.add_command(product_stock)
product.add_command(product_undiscount)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
cli.add_command(checkout)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
