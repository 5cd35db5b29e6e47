"""Application service: Add To Cart use case.

Looks the product up, lets the Cart aggregate apply the stock guard,
and saves the cart back to its store.
"""

from __future__ import annotations

import logging

from btshop.application.clock import Clock, utc_now
from btshop.application.dto import CartDTO
from btshop.application.mappers import cart_to_dto
from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.repository.cart_repository import CartRepository
from btshop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: str, quantity: int = 1) -> CartDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None or not product.is_active:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        cart = self._cart_repo.load()
        try:
            line = cart.add_item(product, self._clock(), quantity)
        except ValidationError as exc:
            logger.info("Cart add rejected: %s", exc)
            raise

        self._cart_repo.save(cart)
        logger.debug("'%s' in cart: %d", line.name, line.quantity)
        return cart_to_dto(cart)
