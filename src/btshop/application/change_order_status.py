"""Application service: Change Order Status use case.

Cancelling an order returns its units to stock before the status
changes.  Any other status move is bookkeeping only.
"""

from __future__ import annotations

import logging

from btshop.application.clock import Clock, utc_now
from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.order import OrderStatus
from btshop.domain.repository.order_repository import OrderRepository
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class ChangeOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, order_id: int, status: str) -> None:
        try:
            new_status = OrderStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Invalid order status: {status!r}") from exc

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if order.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")

        if new_status == OrderStatus.CANCELLED:
            StockService(self._product_repo).restock_for_order(order)

        order.change_status(new_status, self._clock())
        self._order_repo.save(order)
        logger.info("Order %s is now %s", order.order_number, new_status.value)
