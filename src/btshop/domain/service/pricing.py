"""Domain service: Pricing and Availability.

Pure functions shared by every surface that shows or sells a product:
catalog listing, product detail, cart and checkout.  Nothing here reads
the clock or touches a repository. The caller passes ``now`` in, so the
same inputs always give the same answer.

None of these functions raise.  Missing data is read conservatively:
no discount means the base price, no stock figure means out of stock.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from btshop.domain.model.discount import DiscountType
from btshop.domain.model.product import DEFAULT_MIN_STOCK_LEVEL, Product
from btshop.domain.model.value_objects import Money


class StockStatus(Enum):
    OUT_OF_STOCK = "out_of_stock"
    LOW = "low"
    IN_STOCK = "in_stock"


def calculate_final_price(product: Product, now: datetime) -> Money:
    """Return the sale price of *product* at moment *now*.

    The base price is returned unchanged unless the product carries a
    discount that is active and whose window contains *now*.
    """
    discount = product.discount
    if discount is None or not discount.is_in_effect(now):
        return product.price

    price = product.price.amount
    if discount.type is DiscountType.PERCENTAGE:
        final = price * (Decimal("1") - discount.value / Decimal("100"))
    else:
        final = price - discount.value

    # Never sell below zero, whatever the discount says.
    return Money(max(Decimal("0"), final), product.price.currency)


def has_active_discount(product: Product, now: datetime) -> bool:
    """True when a discount is in effect and actually lowers the price."""
    if product.discount is None or not product.discount.is_in_effect(now):
        return False
    return calculate_final_price(product, now) < product.price


def classify_stock(
    stock_quantity: int | None,
    min_stock_level: int | None = DEFAULT_MIN_STOCK_LEVEL,
) -> StockStatus:
    """Classify a stock level against its low-stock threshold.

    The threshold is inclusive: exactly ``min_stock_level`` units left
    reads as low.  ``min_stock_level=None`` means the default of 5;
    an explicit 0 is taken literally.
    """
    if min_stock_level is None:
        min_stock_level = DEFAULT_MIN_STOCK_LEVEL
    if stock_quantity is None or stock_quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock_quantity <= min_stock_level:
        return StockStatus.LOW
    return StockStatus.IN_STOCK


def stock_status_of(product: Product) -> StockStatus:
    return classify_stock(product.stock_quantity, product.low_stock_threshold)
