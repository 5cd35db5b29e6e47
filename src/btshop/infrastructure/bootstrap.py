"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:
- ``BTSHOP_DATA_DIR``: directory holding the JSON files
  (default: ``<project root>/data``).
- ``BTSHOP_CART_KEY``: key the cart is stored under in ``storage.json``.
"""

from __future__ import annotations

import os
from pathlib import Path

from btshop.infrastructure.persistence.json_cart_repository import (
    DEFAULT_CART_KEY,
    JsonCartRepository,
)
from btshop.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from btshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from btshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from btshop.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("BTSHOP_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(data_dir() / "categories.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def review_repository() -> JsonReviewRepository:
    return JsonReviewRepository(data_dir() / "reviews.json")


def cart_repository() -> JsonCartRepository:
    key = os.environ.get("BTSHOP_CART_KEY", DEFAULT_CART_KEY)
    return JsonCartRepository(data_dir() / "storage.json", key=key)
