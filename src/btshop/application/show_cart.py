"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from btshop.application.dto import CartDTO
from btshop.application.mappers import cart_to_dto
from btshop.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> CartDTO:
        return cart_to_dto(self._cart_repo.load())
