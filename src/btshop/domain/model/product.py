"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices and discounts change, stock is replenished and sold,
products are hidden from and returned to the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from btshop.domain.exceptions import InsufficientStockError, ValidationError
from btshop.domain.model.discount import Discount
from btshop.domain.model.review import RatingSummary
from btshop.domain.model.value_objects import Money

DEFAULT_MIN_STOCK_LEVEL = 5


@dataclass
class Product:
    """A product in the catalog.

    ``stock_quantity`` is optional: ``None`` means the stock was never
    recorded, which sells exactly like zero but is kept distinct so the
    storefront can omit the "units left" hint.  ``min_stock_level`` is the
    low-stock threshold; ``None`` falls back to ``DEFAULT_MIN_STOCK_LEVEL``.
    """

    id: str
    name: str
    price: Money
    discount: Discount | None = None
    stock_quantity: int | None = None
    min_stock_level: int | None = None
    category_id: str | None = None
    brand: str | None = None
    description: str = ""
    image_url: str | None = None
    tags: list[str] = field(default_factory=list)
    is_active: bool = True
    is_featured: bool = False
    rating: float = 0.0
    review_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def low_stock_threshold(self) -> int:
        if self.min_stock_level is None:
            return DEFAULT_MIN_STOCK_LEVEL
        return self.min_stock_level

    @property
    def available_quantity(self) -> int:
        return self.stock_quantity or 0

    # --- Details --------------------------------------------------------------

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def update_details(
        self,
        description: str | None = None,
        brand: str | None = None,
        is_featured: bool | None = None,
    ) -> None:
        """Change catalog details; ``None`` leaves a field as it is.

        An empty brand clears it.
        """
        if description is not None:
            self.description = description
        if brand is not None:
            self.brand = brand.strip() or None
        if is_featured is not None:
            self.is_featured = is_featured

    def file_under(self, category_id: str | None) -> None:
        self.category_id = category_id

    def record_rating(self, summary: RatingSummary) -> None:
        """Refresh the derived rating from the product's reviews."""
        self.rating = summary.average
        self.review_count = summary.total

    # --- Pricing --------------------------------------------------------------

    def update_price(self, new_price: Money) -> None:
        """Change the base price.

        Carts and orders keep the price they captured, so this never
        rewrites history.
        """
        self.price = new_price

    def apply_discount(self, discount: Discount) -> None:
        self.discount = discount

    def remove_discount(self) -> None:
        self.discount = None

    # --- Stock ----------------------------------------------------------------

    def set_stock(self, quantity: int, min_stock_level: int | None = None) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        if min_stock_level is not None:
            if min_stock_level < 0:
                raise ValidationError("Minimum stock level cannot be negative")
            self.min_stock_level = min_stock_level
        self.stock_quantity = quantity

    def withdraw_stock(self, quantity: int) -> None:
        """Deduct sold units.

        Raises InsufficientStockError if fewer units are in stock.
        """
        if quantity <= 0:
            raise ValidationError("Withdrawal quantity must be positive")
        if quantity > self.available_quantity:
            raise InsufficientStockError(
                f"Not enough '{self.name}' in stock "
                f"(requested {quantity}, available {self.available_quantity})"
            )
        self.stock_quantity = self.available_quantity - quantity

    def restock(self, quantity: int) -> None:
        """Return units to stock (e.g. from a cancelled order)."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.stock_quantity = self.available_quantity + quantity

    # --- Visibility -----------------------------------------------------------

    def deactivate(self) -> None:
        self.is_active = False

    def activate(self) -> None:
        self.is_active = True
