"""Application services: Show Order and List Orders (queries)."""

from __future__ import annotations

from btshop.application.dto import OrderDTO
from btshop.application.mappers import order_to_dto
from btshop.domain.exceptions import EntityNotFoundError
from btshop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.list_all()]
