"""Application service: Set Stock use case."""

from __future__ import annotations

import logging

from btshop.domain.exceptions import EntityNotFoundError
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.service.pricing import StockStatus, stock_status_of

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        quantity: int,
        min_stock_level: int | None = None,
    ) -> StockStatus:
        """Set the units in stock, and optionally the low-stock threshold."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.set_stock(quantity, min_stock_level)
        self._product_repo.save(product)

        status = stock_status_of(product)
        logger.info("Stock of '%s' set to %d (%s)", product.name, quantity, status.value)
        return status
