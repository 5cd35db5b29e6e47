"""Application service: Add Product use case."""

from __future__ import annotations

from btshop.application.clock import Clock, utc_now
from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money
from btshop.domain.repository.category_repository import CategoryRepository
from btshop.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._clock = clock

    def handle(
        self,
        name: str,
        price: str,
        stock_quantity: int | None = None,
        min_stock_level: int | None = None,
        category: str | None = None,
        brand: str | None = None,
        description: str = "",
        is_featured: bool = False,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        category_id = None
        if category:
            found = self._category_repo.get(category)
            if found is None:
                raise EntityNotFoundError(f"Category not found: '{category}'")
            category_id = found.id

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        # Imported records may carry non-numeric ids (e.g. ObjectId strings).
        numeric_ids = [int(p.id) for p in all_products if p.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            category_id=category_id,
            brand=brand,
            description=description,
            is_featured=is_featured,
            created_at=self._clock(),
        )
        if stock_quantity is not None:
            product.set_stock(stock_quantity, min_stock_level)
        elif min_stock_level is not None:
            raise ValidationError("Minimum stock level needs a stock quantity")

        self._product_repo.save(product)
        return product
