"""Application services: change, remove and clear cart lines."""

from __future__ import annotations

import logging

from btshop.application.dto import CartDTO
from btshop.application.mappers import cart_to_dto
from btshop.domain.exceptions import ValidationError
from btshop.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class ChangeCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str, quantity: int) -> CartDTO:
        """Set a line's quantity; zero or less removes the line."""
        cart = self._cart_repo.load()
        try:
            cart.change_quantity(product_id, quantity)
        except ValidationError as exc:
            logger.info("Cart quantity change rejected: %s", exc)
            raise
        self._cart_repo.save(cart)
        return cart_to_dto(cart)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str) -> CartDTO:
        cart = self._cart_repo.load()
        line = cart.remove_item(product_id)
        self._cart_repo.save(cart)
        logger.info("'%s' removed from cart", line.name)
        return cart_to_dto(cart)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> None:
        cart = self._cart_repo.load()
        cart.clear()
        self._cart_repo.save(cart)
