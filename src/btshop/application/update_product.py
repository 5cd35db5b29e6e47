"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money
from btshop.domain.repository.category_repository import CategoryRepository
from btshop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        name: str | None = None,
        description: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        is_featured: bool | None = None,
    ) -> Product:
        """Edit a product's price and catalog details.

        Arguments left as ``None`` are not touched. An empty ``category``
        takes the product out of its category.

        A price change does NOT affect any existing carts or orders: they
        captured a price snapshot when the product was added.
        """
        changes = (new_price, name, description, brand, category, is_featured)
        if all(value is None for value in changes):
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Validate everything before the product is touched.
        if name is not None:
            existing = self._product_repo.get_by_name(name.strip())
            if existing is not None and existing.id != product.id:
                raise ValidationError(f"Product '{name}' already exists")

        category_id = None
        if category:
            found = self._category_repo.get(category)
            if found is None:
                raise EntityNotFoundError(f"Category not found: '{category}'")
            category_id = found.id

        price = None
        if new_price is not None:
            price = Money.of(new_price, product.price.currency)

        if name is not None:
            product.rename(name)
        if category is not None:
            product.file_under(category_id)
        if price is not None:
            product.update_price(price)

        product.update_details(
            description=description, brand=brand, is_featured=is_featured
        )
        self._product_repo.save(product)
        logger.debug("Product #%s updated", product.id)
        return product
