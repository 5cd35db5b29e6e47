"""Domain service: Stock Movement.

Coordinates the cross-aggregate operation of taking sold units out of
product stock at checkout, and putting them back when an order is
cancelled.

The two-phase approach (validate-then-mutate) ensures we never leave
stock partially withdrawn if one product of the cart fails validation.
"""

from __future__ import annotations

import logging

from btshop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from btshop.domain.model.cart import Cart
from btshop.domain.model.order import Order
from btshop.domain.model.product import Product
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.service.pricing import stock_status_of

logger = logging.getLogger(__name__)


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def withdraw_for_cart(self, cart: Cart) -> list[Product]:
        """Deduct the stock for every cart line.

        Uses a two-phase approach:
          Phase 1 — load and validate: every product exists, is on sale
                    and has enough units.  Fails fast before any mutation.
          Phase 2 — mutate and persist.

        Returns the products in cart-line order.
        """
        # Phase 1: load all products and validate
        to_withdraw: list[tuple[Product, int]] = []

        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{line.name}' no longer exists")
            if not product.is_active:
                raise ValidationError(
                    f"Product '{product.name}' is not available for ordering"
                )
            if line.quantity > product.available_quantity:
                raise InsufficientStockError(
                    f"Not enough '{product.name}' in stock "
                    f"(available {product.available_quantity}, requested {line.quantity})"
                )
            to_withdraw.append((product, line.quantity))

        # Phase 2: mutate and persist
        for product, qty in to_withdraw:
            before = product.available_quantity
            product.withdraw_stock(qty)
            self._product_repo.save(product)
            logger.info(
                "Stock of '%s': %d -> %d (%s)",
                product.name, before, product.available_quantity,
                stock_status_of(product).value,
            )

        return [product for product, _ in to_withdraw]

    def restock_for_order(self, order: Order) -> None:
        """Return every line of *order* to stock.

        Products deleted since checkout are skipped.
        """
        for line in order.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Cannot restock '%s' for %s: product no longer exists",
                    line.product_name, order.order_number,
                )
                continue
            product.restock(line.quantity.value)
            self._product_repo.save(product)
            logger.info(
                "Returned %d of '%s' to stock, now %d (%s)",
                line.quantity.value, product.name, product.available_quantity,
                stock_status_of(product).value,
            )
