"""Application service: List Categories query."""

from __future__ import annotations

from btshop.application.dto import CategoryDTO
from btshop.domain.repository.category_repository import CategoryRepository
from btshop.domain.repository.product_repository import ProductRepository


class ListCategoriesHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def handle(self) -> list[CategoryDTO]:
        """Return every category sorted by name, with its active product count."""
        counts: dict[str, int] = {}
        for product in self._product_repo.list_all():
            if product.is_active and product.category_id:
                counts[product.category_id] = counts.get(product.category_id, 0) + 1
        return [
            CategoryDTO(
                id=c.id,
                name=c.name,
                slug=c.slug,
                product_count=counts.get(c.id, 0),
            )
            for c in sorted(self._category_repo.list_all(), key=lambda c: c.name.lower())
        ]
