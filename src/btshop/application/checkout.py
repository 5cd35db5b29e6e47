"""Application service: Checkout use case.

Turns the cart into a pending order:
1. Refuse an empty cart.
2. Build the Order with the prices captured in the cart; the order
   rules (customer, phone, courier address) are checked here, before
   any stock moves.
3. Withdraw stock for every line via the StockService (all lines are
   validated before any stock moves).
4. Persist the order, then clear and persist the cart.
"""

from __future__ import annotations

import logging

from btshop.application.clock import Clock, utc_now
from btshop.application.dto import OrderDTO
from btshop.application.mappers import order_to_dto
from btshop.domain.exceptions import ValidationError
from btshop.domain.model.order import (
    DeliveryInfo,
    DeliveryType,
    Order,
    OrderLineItem,
)
from btshop.domain.model.value_objects import Quantity
from btshop.domain.repository.cart_repository import CartRepository
from btshop.domain.repository.order_repository import OrderRepository
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._clock = clock

    def handle(
        self,
        customer_name: str,
        phone: str,
        delivery_type: str = DeliveryType.PICKUP.value,
        address: str | None = None,
    ) -> OrderDTO:
        cart = self._cart_repo.load()
        if cart.is_empty:
            raise ValidationError("Cart is empty")

        try:
            delivery = DeliveryInfo(
                type=DeliveryType(delivery_type), phone=phone, address=address
            )
        except ValueError as exc:
            raise ValidationError(f"Unknown delivery type: {delivery_type!r}") from exc

        now = self._clock()
        items = [
            OrderLineItem(
                product_id=line.product_id,
                product_name=line.name,
                quantity=Quantity(line.quantity),
                unit_price=line.unit_price,  # <-- price captured in the cart
            )
            for line in cart.lines
        ]
        order = Order.create(
            customer_name=customer_name, items=items, delivery=delivery, now=now
        )

        StockService(self._product_repo).withdraw_for_cart(cart)
        self._order_repo.save(order)

        cart.clear()
        self._cart_repo.save(cart)

        logger.info(
            "Order %s placed for %s, total %s",
            order.order_number, order.customer_name, order.total,
        )
        return order_to_dto(order)
