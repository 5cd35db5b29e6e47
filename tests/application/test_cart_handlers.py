"""Integration tests for the cart use cases."""

from decimal import Decimal

import pytest

from btshop.application.add_to_cart import AddToCartHandler
from btshop.application.show_cart import ShowCartHandler
from btshop.application.update_cart import (
    ChangeCartQuantityHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
)
from btshop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    OutOfStockError,
)
from btshop.domain.model.discount import Discount, DiscountType
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup(clock) -> tuple[AddToCartHandler, FakeCartRepository, FakeProductRepository]:
    products = FakeProductRepository([
        Product(
            id="1", name="Kettle", price=Money.of("1000"), stock_quantity=2,
            discount=Discount(DiscountType.PERCENTAGE, Decimal("20"), is_active=True),
        ),
        Product(id="2", name="Toaster", price=Money.of("3000"), stock_quantity=0),
        Product(id="3", name="Old Fan", price=Money.of("900"), stock_quantity=5, is_active=False),
        Product(id="4", name="Iron", price=Money.of("2500"), stock_quantity=10),
    ])
    carts = FakeCartRepository()
    return AddToCartHandler(carts, products, clock=clock), carts, products


class TestAddToCart:

    def test_add_and_persist(self, clock):
        handler, carts, _ = _setup(clock)
        dto = handler.handle("1")
        assert carts.save_count == 1
        assert dto.item_count == 1
        assert dto.items[0].unit_price == "800.00 ₽"
        assert dto.subtotal == "800.00 ₽"

    def test_quantity_above_stock_rejected_without_save(self, clock):
        handler, carts, _ = _setup(clock)
        with pytest.raises(InsufficientStockError):
            handler.handle("1", quantity=3)
        assert carts.save_count == 0
        assert carts.cart.is_empty

    def test_out_of_stock_rejected(self, clock):
        handler, carts, _ = _setup(clock)
        with pytest.raises(OutOfStockError):
            handler.handle("2")
        assert carts.cart.is_empty

    def test_inactive_product_not_found(self, clock):
        handler, _, _ = _setup(clock)
        with pytest.raises(EntityNotFoundError):
            handler.handle("3")

    def test_unknown_product(self, clock):
        handler, _, _ = _setup(clock)
        with pytest.raises(EntityNotFoundError):
            handler.handle("99")

    def test_price_change_after_add_keeps_snapshot(self, clock):
        handler, carts, products = _setup(clock)
        handler.handle("4")
        products.get_by_id("4").update_price(Money.of("9999"))
        dto = ShowCartHandler(carts).handle()
        assert dto.items[0].unit_price == "2 500.00 ₽"


class TestChangeQuantity:

    def test_change(self, clock):
        handler, carts, _ = _setup(clock)
        handler.handle("4")
        dto = ChangeCartQuantityHandler(carts).handle("4", 7)
        assert dto.items[0].quantity == 7
        assert dto.subtotal == "17 500.00 ₽"

    def test_above_stock_keeps_prior(self, clock):
        handler, carts, _ = _setup(clock)
        handler.handle("1")
        with pytest.raises(InsufficientStockError):
            ChangeCartQuantityHandler(carts).handle("1", 3)
        assert carts.cart.get_line("1").quantity == 1

    def test_zero_removes(self, clock):
        handler, carts, _ = _setup(clock)
        handler.handle("4")
        dto = ChangeCartQuantityHandler(carts).handle("4", 0)
        assert dto.items == []


class TestRemoveAndClear:

    def test_remove(self, clock):
        handler, carts, _ = _setup(clock)
        handler.handle("1")
        handler.handle("4")
        dto = RemoveFromCartHandler(carts).handle("1")
        assert [i.product_id for i in dto.items] == ["4"]

    def test_remove_missing_line(self, clock):
        _, carts, _ = _setup(clock)
        with pytest.raises(EntityNotFoundError):
            RemoveFromCartHandler(carts).handle("1")

    def test_clear(self, clock):
        handler, carts, _ = _setup(clock)
        handler.handle("1")
        ClearCartHandler(carts).handle()
        assert ShowCartHandler(carts).handle().item_count == 0
