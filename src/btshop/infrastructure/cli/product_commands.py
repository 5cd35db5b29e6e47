"""CLI commands for the Product aggregate (back office)."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from btshop.application.add_product import AddProductHandler
from btshop.application.add_review import AddReviewHandler
from btshop.application.deactivate_product import DeactivateProductHandler
from btshop.application.list_reviews import ListReviewsHandler
from btshop.application.set_discount import RemoveDiscountHandler, SetDiscountHandler
from btshop.application.set_stock import SetStockHandler
from btshop.application.update_product import UpdateProductHandler
from btshop.domain.exceptions import DomainException
from btshop.domain.model.discount import DiscountType
from btshop.domain.model.review import MAX_RATING, MIN_RATING
from btshop.infrastructure.bootstrap import (
    category_repository,
    order_repository,
    product_repository,
    review_repository,
)


def _as_utc(value: datetime | None) -> datetime | None:
    """click.DateTime gives naive datetimes; the domain works in UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15990).")
@click.option("--stock", type=int, default=None, help="Units in stock.")
@click.option("--min-stock", type=int, default=None, help="Low-stock threshold.")
@click.option("--category", default=None, help="Category ID or slug.")
@click.option("--brand", default=None, help="Brand name.")
@click.option("--featured", is_flag=True, help="Mark as featured.")
def product_add(
    name: str,
    price: str,
    stock: int | None,
    min_stock: int | None,
    category: str | None,
    brand: str | None,
    featured: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock_quantity=stock,
            min_stock_level=min_stock,
            category=category,
            brand=brand,
            is_featured=featured,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29990).")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--brand", default=None, help="Brand name (empty to clear).")
@click.option("--category", default=None, help="Category ID or slug (empty to clear).")
@click.option("--featured/--not-featured", default=None, help="Featured flag.")
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    description: str | None,
    brand: str | None,
    category: str | None,
    featured: bool | None,
) -> None:
    """Edit a product's price and details."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        product = handler.handle(
            product_id=product_id,
            new_price=price,
            name=name,
            description=description,
            brand=brand,
            category=category,
            is_featured=featured,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price})")


@click.command("discount")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--type",
    "discount_type",
    type=click.Choice([t.value for t in DiscountType]),
    default=DiscountType.PERCENTAGE.value,
    show_default=True,
)
@click.option("--value", required=True, help="Percent or amount off.")
@click.option("--start", type=click.DateTime(), default=None, help="First day (UTC).")
@click.option("--end", type=click.DateTime(), default=None, help="Last moment (UTC).")
@click.option("--inactive", is_flag=True, help="Store the discount switched off.")
def product_discount(
    product_id: str,
    discount_type: str,
    value: str,
    start: datetime | None,
    end: datetime | None,
    inactive: bool,
) -> None:
    """Attach a discount to a product."""
    handler = SetDiscountHandler(product_repo=product_repository())

    try:
        discount = handler.handle(
            product_id=product_id,
            discount_type=discount_type,
            value=value,
            start_date=_as_utc(start),
            end_date=_as_utc(end),
            is_active=not inactive,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} discount set to {discount.label}")


@click.command("undiscount")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_undiscount(product_id: str) -> None:
    """Remove a product's discount."""
    handler = RemoveDiscountHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} discount removed")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--min-stock", type=int, default=None, help="Low-stock threshold.")
def product_stock(product_id: str, quantity: int, min_stock: int | None) -> None:
    """Set stock level for a product."""
    handler = SetStockHandler(product_repo=product_repository())

    try:
        status = handler.handle(
            product_id=product_id, quantity=quantity, min_stock_level=min_stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for #{product_id} set to {quantity} ({status.value})")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Hide a product from the catalog."""
    handler = DeactivateProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} hidden from the catalog")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Return a product to the catalog."""
    handler = DeactivateProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id=product_id, active=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} is back in the catalog")


@click.command("review")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--author", required=True, help="Reviewer name.")
@click.option(
    "--rating",
    required=True,
    type=click.IntRange(MIN_RATING, MAX_RATING),
    help="Stars, 1 to 5.",
)
@click.option("--text", required=True, help="Review text (10+ characters).")
@click.option("--order", "order_id", type=int, default=None, help="Order it was bought in.")
def product_review(
    product_id: str,
    author: str,
    rating: int,
    text: str,
    order_id: int | None,
) -> None:
    """Leave a review and update the product's rating."""
    handler = AddReviewHandler(
        product_repo=product_repository(),
        review_repo=review_repository(),
        order_repo=order_repository(),
    )

    try:
        review = handler.handle(
            product_id=product_id,
            author=author,
            rating=rating,
            text=text,
            order_id=order_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review #{review.id} ({review.rating}/5) saved for product #{product_id}")


@click.command("reviews")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_reviews(product_id: str) -> None:
    """Show a product's reviews and rating breakdown."""
    handler = ListReviewsHandler(
        product_repo=product_repository(),
        review_repo=review_repository(),
    )

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"#{dto.product_id} {dto.product_name}")
    if not dto.total_reviews:
        click.echo("No reviews yet.")
        return

    click.echo(f"Rating: {dto.average_rating:.1f} ({dto.total_reviews} reviews)")
    for stars, count in dto.distribution.items():
        click.echo(f"  {stars}★ {count}")
    for review in dto.reviews:
        source = f", order #{review.order_id}" if review.order_id is not None else ""
        click.echo(f"\n{review.author}, {review.created_at}{source}: {review.rating}/5")
        click.echo(f"  {review.text}")
