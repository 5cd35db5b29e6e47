"""Application service: hide a product from, or return it to, the catalog.

Inactive products stay in the back office and in past orders, but the
catalog skips them and checkout refuses them.
"""

from __future__ import annotations

from btshop.domain.exceptions import EntityNotFoundError
from btshop.domain.repository.product_repository import ProductRepository


class DeactivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, active: bool = False) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if active:
            product.activate()
        else:
            product.deactivate()
        self._product_repo.save(product)
