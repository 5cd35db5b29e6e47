"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from btshop.domain.model.order import (
    DeliveryInfo,
    DeliveryType,
    Order,
    OrderLineItem,
    OrderStatus,
)
from btshop.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from btshop.domain.repository.order_repository import OrderRepository
from btshop.infrastructure.persistence.dates import format_datetime, parse_datetime


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "delivery": {
                "type": order.delivery.type.value,
                "phone": order.delivery.phone,
                "address": order.delivery.address,
            },
            "created_at": format_datetime(order.created_at),
            "updated_at": format_datetime(order.updated_at),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(
                    Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)
                ),
            )
            for i in raw["items"]
        ]
        delivery = raw["delivery"]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            customer_name=raw["customer_name"],
            items=items,
            delivery=DeliveryInfo(
                type=DeliveryType(delivery["type"]),
                phone=delivery["phone"],
                address=delivery.get("address"),
            ),
            status=OrderStatus(raw["status"]),
            created_at=parse_datetime(raw["created_at"]),
            updated_at=parse_datetime(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
