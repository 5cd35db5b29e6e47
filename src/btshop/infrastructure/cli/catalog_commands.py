"""CLI commands for browsing the catalog."""

from __future__ import annotations

from decimal import Decimal

import click

from btshop.application.add_category import AddCategoryHandler
from btshop.application.browse_catalog import (
    BrowseCatalogHandler,
    CatalogQuery,
    SortOrder,
)
from btshop.application.dto import ProductDTO
from btshop.application.list_categories import ListCategoriesHandler
from btshop.application.show_product import ShowProductHandler
from btshop.domain.exceptions import DomainException
from btshop.infrastructure.bootstrap import category_repository, product_repository

_STOCK_LABELS = {
    "out_of_stock": "out of stock",
    "low": "running low",
    "in_stock": "in stock",
}


@click.command("list")
@click.option("--category", default=None, help="Category ID or slug.")
@click.option("--search", default=None, help="Text to look for.")
@click.option("--min-price", type=click.FLOAT, default=None, help="Lowest final price.")
@click.option("--max-price", type=click.FLOAT, default=None, help="Highest final price.")
@click.option("--brand", "brands", multiple=True, help="Brand (repeatable).")
@click.option("--in-stock", is_flag=True, help="Only products in stock.")
@click.option("--featured", is_flag=True, help="Only featured products.")
@click.option("--discounted", is_flag=True, help="Only products on sale.")
@click.option("--min-rating", type=click.FLOAT, default=0.0, help="Minimum rating.")
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SortOrder]),
    default=SortOrder.NAME.value,
    show_default=True,
)
def catalog_list(
    category: str | None,
    search: str | None,
    min_price: float | None,
    max_price: float | None,
    brands: tuple[str, ...],
    in_stock: bool,
    featured: bool,
    discounted: bool,
    min_rating: float,
    sort: str,
) -> None:
    """List catalog products."""
    query = CatalogQuery(
        category=category,
        search=search,
        min_price=Decimal(str(min_price)) if min_price is not None else None,
        max_price=Decimal(str(max_price)) if max_price is not None else None,
        brands=list(brands),
        in_stock_only=in_stock,
        featured_only=featured,
        discounted_only=discounted,
        min_rating=min_rating,
        sort=SortOrder(sort),
    )
    handler = BrowseCatalogHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        products = handler.handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>14} {'Sale':>8} {'Stock':<14}")
    click.echo("-" * 74)
    for p in products:
        badge = p.discount_label or ""
        click.echo(
            f"{p.id:<6} {p.name:<28} {p.final_price:>14} {badge:>8} "
            f"{_STOCK_LABELS[p.stock_status]:<14}"
        )


@click.command("show")
@click.argument("product_id")
def catalog_show(product_id: str) -> None:
    """Show a product's detail card."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("categories")
def catalog_categories() -> None:
    """List catalog categories."""
    handler = ListCategoriesHandler(
        category_repo=category_repository(),
        product_repo=product_repository(),
    )
    categories = handler.handle()
    if not categories:
        click.echo("No categories yet.")
        return
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<28} /{c.slug:<24} {c.product_count:>4} products")


@click.command("category-add")
@click.option("--name", required=True, help="Category name.")
@click.option("--slug", default=None, help="URL slug (derived from the name by default).")
def catalog_category_add(name: str, slug: str | None) -> None:
    """Add a catalog category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name=name, slug=slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added as /{category.slug}")


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"#{dto.id} {dto.name}")
    if dto.brand:
        click.echo(f"Brand:    {dto.brand}")
    if dto.category:
        click.echo(f"Category: {dto.category}")
    if dto.has_discount:
        click.echo(f"Price:    {dto.final_price}  (was {dto.price}, {dto.discount_label})")
    else:
        click.echo(f"Price:    {dto.final_price}")
    click.echo(f"Status:   {_STOCK_LABELS[dto.stock_status]}")
    if dto.stock_quantity is not None:
        click.echo(f"In stock: {dto.stock_quantity} pcs")
    if dto.review_count:
        click.echo(f"Rating:   {dto.rating:.1f} ({dto.review_count} reviews)")
    elif dto.rating:
        click.echo(f"Rating:   {dto.rating:.1f}")
