"""Application services: attach or remove a product discount."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.discount import Discount, DiscountType
from btshop.domain.model.product import Product
from btshop.domain.repository.product_repository import ProductRepository


def _load(product_repo: ProductRepository, product_id: str) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product


class SetDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        discount_type: str,
        value: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        is_active: bool = True,
    ) -> Discount:
        """Replace the product's discount with a new one."""
        try:
            kind = DiscountType(discount_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown discount type: {discount_type!r}") from exc
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid discount value: {value!r}") from exc

        product = _load(self._product_repo, product_id)
        discount = Discount.create(
            type=kind,
            value=amount,
            is_active=is_active,
            start_date=start_date,
            end_date=end_date,
        )
        product.apply_discount(discount)
        self._product_repo.save(product)
        return discount


class RemoveDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product = _load(self._product_repo, product_id)
        product.remove_discount()
        self._product_repo.save(product)
