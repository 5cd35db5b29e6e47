"""Application service: Browse Catalog use case (query).

Filters and sorts the active products the way the storefront catalog
page does.  Every price predicate and price sort uses the *final*
price, so a discounted product shows up in the price band it is
actually sold at.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from btshop.application.clock import Clock, utc_now
from btshop.application.dto import ProductDTO
from btshop.application.mappers import product_to_dto
from btshop.domain.exceptions import ValidationError
from btshop.domain.model.category import ProductCategory
from btshop.domain.model.product import Product
from btshop.domain.repository.category_repository import CategoryRepository
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.service.pricing import calculate_final_price, has_active_discount


class SortOrder(Enum):
    NAME = "name"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"
    NEWEST = "newest"
    FEATURED = "featured"


@dataclass(frozen=True)
class CatalogQuery:
    """Input: the catalog page's filter panel."""

    category: str | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    brands: list[str] = field(default_factory=list)
    in_stock_only: bool = False
    featured_only: bool = False
    discounted_only: bool = False
    min_rating: float = 0.0
    sort: SortOrder = SortOrder.NAME


class BrowseCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._clock = clock

    def handle(self, query: CatalogQuery) -> list[ProductDTO]:
        if (
            query.min_price is not None
            and query.max_price is not None
            and query.min_price > query.max_price
        ):
            raise ValidationError("Minimum price must not exceed maximum price")

        now = self._clock()
        categories = {c.id: c for c in self._category_repo.list_all()}

        category_id: str | None = None
        if query.category and query.category != "all":
            category = self._category_repo.get(query.category)
            # An unknown category simply matches nothing.
            category_id = category.id if category else query.category

        products = [
            p for p in self._product_repo.list_all()
            if p.is_active
            and (category_id is None or p.category_id == category_id)
            and self._matches(p, query, now, categories)
        ]
        products = self._sorted(products, query.sort, now)

        return [
            product_to_dto(p, now, categories.get(p.category_id or ""))
            for p in products
        ]

    # --- Filtering ------------------------------------------------------------

    @staticmethod
    def _matches(
        product: Product,
        query: CatalogQuery,
        now: datetime,
        categories: dict[str, ProductCategory],
    ) -> bool:
        if query.search:
            needle = query.search.lower()
            category = categories.get(product.category_id or "")
            haystack = [
                product.name,
                product.description,
                product.brand or "",
                category.name if category else "",
                *product.tags,
            ]
            if not any(needle in text.lower() for text in haystack):
                return False

        final = calculate_final_price(product, now).amount
        if query.min_price is not None and final < query.min_price:
            return False
        if query.max_price is not None and final > query.max_price:
            return False

        if query.brands and product.brand not in query.brands:
            return False
        if query.in_stock_only and product.available_quantity <= 0:
            return False
        if query.featured_only and not product.is_featured:
            return False
        if query.discounted_only and not has_active_discount(product, now):
            return False
        if query.min_rating > 0 and product.rating < query.min_rating:
            return False
        return True

    # --- Sorting --------------------------------------------------------------

    @staticmethod
    def _sorted(products: list[Product], sort: SortOrder, now: datetime) -> list[Product]:
        if sort is SortOrder.PRICE_ASC:
            return sorted(products, key=lambda p: calculate_final_price(p, now).amount)
        if sort is SortOrder.PRICE_DESC:
            return sorted(
                products,
                key=lambda p: calculate_final_price(p, now).amount,
                reverse=True,
            )
        if sort is SortOrder.RATING_DESC:
            return sorted(products, key=lambda p: p.rating, reverse=True)
        if sort is SortOrder.NEWEST:
            return sorted(products, key=lambda p: p.created_at, reverse=True)
        if sort is SortOrder.FEATURED:
            return sorted(products, key=lambda p: p.is_featured, reverse=True)
        if sort is SortOrder.NAME_DESC:
            return sorted(products, key=lambda p: p.name.lower(), reverse=True)
        return sorted(products, key=lambda p: p.name.lower())
