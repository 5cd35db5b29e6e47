"""Unit tests for the Order aggregate."""

import re

import pytest

from btshop.domain.exceptions import ValidationError
from btshop.domain.model.order import (
    MAX_LINE_ITEMS,
    DeliveryInfo,
    DeliveryType,
    Order,
    OrderLineItem,
    OrderStatus,
    generate_order_number,
)
from btshop.domain.model.value_objects import Money, Quantity


def _item(product_id: str = "1", qty: int = 1, price: str = "1000") -> OrderLineItem:
    return OrderLineItem(
        product_id=product_id,
        product_name=f"Product {product_id}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


PICKUP = DeliveryInfo(type=DeliveryType.PICKUP, phone="+7 900 000-00-00")
COURIER = DeliveryInfo(
    type=DeliveryType.COURIER, phone="+7 900 000-00-00", address="Lenina 1, Moscow"
)


class TestOrderCreate:

    def test_create_pending(self, now):
        order = Order.create("Ivan", [_item()], PICKUP, now)
        assert order.status == OrderStatus.PENDING
        assert order.id is None
        assert order.created_at == now

    def test_strips_customer_name(self, now):
        assert Order.create("  Ivan ", [_item()], PICKUP, now).customer_name == "Ivan"

    def test_customer_required(self, now):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Order.create("  ", [_item()], PICKUP, now)

    def test_items_required(self, now):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create("Ivan", [], PICKUP, now)

    def test_too_many_items(self, now):
        items = [_item(str(i)) for i in range(MAX_LINE_ITEMS + 1)]
        with pytest.raises(ValidationError, match="Maximum"):
            Order.create("Ivan", items, PICKUP, now)

    def test_phone_required(self, now):
        delivery = DeliveryInfo(type=DeliveryType.PICKUP, phone="")
        with pytest.raises(ValidationError, match="phone"):
            Order.create("Ivan", [_item()], delivery, now)

    def test_courier_requires_address(self, now):
        delivery = DeliveryInfo(type=DeliveryType.COURIER, phone="123")
        with pytest.raises(ValidationError, match="address"):
            Order.create("Ivan", [_item()], delivery, now)


class TestOrderTotals:

    def test_pickup_is_free(self, now):
        order = Order.create("Ivan", [_item(qty=2), _item("2", price="500")], PICKUP, now)
        assert order.subtotal == Money.of("2500")
        assert order.delivery_fee == Money.zero()
        assert order.total == Money.of("2500")

    def test_courier_adds_fee(self, now):
        order = Order.create("Ivan", [_item()], COURIER, now)
        assert order.delivery_fee == Money.of("500")
        assert order.total == Money.of("1500")


class TestOrderStatus:

    def test_change_status(self, now):
        order = Order.create("Ivan", [_item()], PICKUP, now)
        order.change_status(OrderStatus.SHIPPED, now)
        assert order.status == OrderStatus.SHIPPED

    def test_cancelled_is_final(self, now):
        order = Order.create("Ivan", [_item()], PICKUP, now)
        order.change_status(OrderStatus.CANCELLED, now)
        with pytest.raises(ValidationError, match="already cancelled"):
            order.change_status(OrderStatus.PENDING, now)


class TestOrderNumber:

    def test_format(self, now):
        number = generate_order_number(now)
        assert re.fullmatch(rf"ORD-{int(now.timestamp() * 1000)}-[A-Z0-9]{{4}}", number)
