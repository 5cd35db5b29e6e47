"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from btshop.domain.model.discount import Discount, DiscountType
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from btshop.domain.repository.product_repository import ProductRepository
from btshop.infrastructure.persistence.dates import format_datetime, parse_datetime


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_domain(item: dict) -> Product:
        discount = None
        if item.get("discount"):
            d = item["discount"]
            discount = Discount(
                type=DiscountType(d.get("type", DiscountType.PERCENTAGE.value)),
                value=Decimal(str(d.get("value", "0"))),
                is_active=d.get("is_active", False),
                start_date=parse_datetime(d.get("start_date")),
                end_date=parse_datetime(d.get("end_date")),
            )
        product = Product(
            id=item["id"],
            name=item["name"],
            price=Money(
                Decimal(str(item["price"])), item.get("currency", DEFAULT_CURRENCY)
            ),
            discount=discount,
            stock_quantity=item.get("stock_quantity"),
            min_stock_level=item.get("min_stock_level"),
            category_id=item.get("category_id"),
            brand=item.get("brand"),
            description=item.get("description", ""),
            image_url=item.get("image_url"),
            tags=list(item.get("tags", [])),
            is_active=item.get("is_active", True),
            is_featured=item.get("is_featured", False),
            rating=float(item.get("rating", 0)),
            review_count=int(item.get("review_count", 0)),
        )
        if item.get("created_at"):
            product.created_at = parse_datetime(item["created_at"])
        return product

    @staticmethod
    def _to_raw(p: Product) -> dict:
        discount = None
        if p.discount is not None:
            discount = {
                "type": p.discount.type.value,
                "value": str(p.discount.value),
                "is_active": p.discount.is_active,
                "start_date": format_datetime(p.discount.start_date),
                "end_date": format_datetime(p.discount.end_date),
            }
        return {
            "id": p.id,
            "name": p.name,
            "price": str(p.price.amount),
            "currency": p.price.currency,
            "discount": discount,
            "stock_quantity": p.stock_quantity,
            "min_stock_level": p.min_stock_level,
            "category_id": p.category_id,
            "brand": p.brand,
            "description": p.description,
            "image_url": p.image_url,
            "tags": p.tags,
            "is_active": p.is_active,
            "is_featured": p.is_featured,
            "rating": p.rating,
            "review_count": p.review_count,
            "created_at": format_datetime(p.created_at),
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
