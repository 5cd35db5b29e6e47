"""Cart persistence on top of a JSON key-value file.

The file holds a single JSON object shared with other client-side
state; the cart occupies one key of it as a list of line records.
No versioning: unreadable lines are a hard error.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from btshop.domain.model.cart import Cart, CartLine
from btshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from btshop.domain.repository.cart_repository import CartRepository

DEFAULT_CART_KEY = "cart-storage"


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, key: str = DEFAULT_CART_KEY) -> None:
        self._file_path = file_path
        self._key = key
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        records = self._load_store().get(self._key, [])
        return Cart(lines=[self._to_domain(r) for r in records])

    def save(self, cart: Cart) -> None:
        store = self._load_store()
        store[self._key] = [self._to_raw(line) for line in cart.lines]
        self._file_path.write_text(
            json.dumps(store, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "product_id": line.product_id,
            "name": line.name,
            "price": str(line.unit_price.amount),
            "currency": line.unit_price.currency,
            "quantity": line.quantity,
            "stock_quantity": line.stock_quantity,
            "image": line.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        return CartLine(
            product_id=raw["product_id"],
            name=raw["name"],
            unit_price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            quantity=raw["quantity"],
            stock_quantity=raw.get("stock_quantity", 0),
            image_url=raw.get("image"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_store(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
