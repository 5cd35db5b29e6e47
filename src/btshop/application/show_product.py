"""Application service: Show Product use case (query)."""

from __future__ import annotations

from btshop.application.clock import Clock, utc_now
from btshop.application.dto import ProductDTO
from btshop.application.mappers import product_to_dto
from btshop.domain.exceptions import EntityNotFoundError
from btshop.domain.repository.category_repository import CategoryRepository
from btshop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._clock = clock

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        category = None
        if product.category_id:
            category = self._category_repo.get(product.category_id)
        return product_to_dto(product, self._clock(), category)
