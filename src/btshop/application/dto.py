"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown on a catalog card or detail page."""

    id: str
    name: str
    price: str  # base price, formatted
    final_price: str
    has_discount: bool
    discount_label: str | None
    stock_status: str
    stock_quantity: int | None
    category: str | None
    brand: str | None
    rating: float
    review_count: int
    is_featured: bool
    is_active: bool


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str
    stock_quantity: int
    stock_status: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    item_count: int
    subtotal: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    customer_name: str
    status: str
    delivery_type: str
    phone: str
    address: str | None
    items: list[OrderLineItemDTO]
    subtotal: str
    delivery_fee: str
    total: str
    created_at: str


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str
    slug: str
    product_count: int


@dataclass(frozen=True)
class ReviewDTO:
    id: int
    product_id: str
    author: str
    rating: int
    text: str
    order_id: int | None
    created_at: str


@dataclass(frozen=True)
class ReviewListDTO:
    """Output: a product's reviews with its rating statistics."""

    product_id: str
    product_name: str
    reviews: list[ReviewDTO]
    average_rating: float
    total_reviews: int
    distribution: dict[int, int]
