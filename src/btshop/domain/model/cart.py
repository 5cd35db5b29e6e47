"""Cart aggregate — the shopper's basket.

The cart is an explicit store object: handlers receive it from a
CartRepository, mutate it through the methods below and save it back.
Each line holds a snapshot of the product taken when it was added.

Stock checks here are advisory.  Nothing is reserved until checkout,
so two carts may both hold the last unit of a product.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from btshop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money
from btshop.domain.service.pricing import calculate_final_price


@dataclass
class CartLine:
    """Product snapshot plus the quantity the shopper wants.

    ``unit_price`` is the final price at the time of addition, rounded to
    whole units.  ``stock_quantity`` caps later quantity changes.
    """

    product_id: str
    name: str
    unit_price: Money
    quantity: int
    stock_quantity: int
    image_url: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:

    lines: list[CartLine] = field(default_factory=list)

    # --- Commands -------------------------------------------------------------

    def add_item(self, product: Product, now: datetime, quantity: int = 1) -> CartLine:
        """Add *quantity* units of *product*, merging with an existing line.

        Rejected outright when the product is out of stock, and when the
        resulting quantity would exceed the stock.  A rejected add leaves
        the cart untouched.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")

        stock = product.available_quantity
        if stock <= 0:
            raise OutOfStockError(f"'{product.name}' is out of stock")

        existing = self.get_line(product.id)
        if existing is not None:
            new_quantity = existing.quantity + quantity
            if new_quantity > stock:
                raise InsufficientStockError(
                    f"Not enough '{product.name}' in stock "
                    f"(available {stock}, already in cart {existing.quantity})"
                )
            existing.quantity = new_quantity
            existing.stock_quantity = stock
            return existing

        if quantity > stock:
            raise InsufficientStockError(
                f"Not enough '{product.name}' in stock "
                f"(available {stock}, requested {quantity})"
            )

        line = CartLine(
            product_id=product.id,
            name=product.name,
            unit_price=calculate_final_price(product, now).rounded(),
            quantity=quantity,
            stock_quantity=stock,
            image_url=product.image_url,
        )
        self.lines.append(line)
        return line

    def change_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        line = self._find_line(product_id)
        if quantity <= 0:
            self.remove_item(product_id)
            return
        if quantity > line.stock_quantity:
            raise InsufficientStockError(
                f"Only {line.stock_quantity} of '{line.name}' available"
            )
        line.quantity = quantity

    def remove_item(self, product_id: str) -> CartLine:
        line = self._find_line(product_id)
        self.lines.remove(line)
        return line

    def clear(self) -> None:
        self.lines.clear()

    # --- Queries --------------------------------------------------------------

    def get_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine:
        line = self.get_line(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
        return line
