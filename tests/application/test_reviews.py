"""Integration tests for adding and listing product reviews."""

from datetime import timedelta

import pytest

from btshop.application.add_review import AddReviewHandler
from btshop.application.list_reviews import ListReviewsHandler
from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.order import DeliveryInfo, DeliveryType, Order, OrderLineItem
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeReviewRepository

TEXT = "Boils quickly and quietly."


@pytest.fixture
def products() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="Kettle", price=Money.of("2500"), stock_quantity=5),
        Product(id="2", name="Toaster", price=Money.of("3490"), stock_quantity=5),
    ])


@pytest.fixture
def orders(now) -> FakeOrderRepository:
    repo = FakeOrderRepository()
    repo.save(Order.create(
        "Olga",
        [OrderLineItem("1", "Kettle", Quantity(1), Money.of("2500"))],
        DeliveryInfo(DeliveryType.PICKUP, "123"),
        now,
    ))
    return repo


@pytest.fixture
def reviews() -> FakeReviewRepository:
    return FakeReviewRepository()


class TestAddReview:

    def test_updates_product_rating(self, products, reviews, orders, clock):
        handler = AddReviewHandler(products, reviews, orders, clock=clock)
        first = handler.handle("1", "Olga", 5, TEXT)
        handler.handle("1", "Ivan", 2, TEXT)

        assert first.id == 1
        assert first.rating == 5
        assert first.created_at == "2024-06-15"
        kettle = products.get_by_id("1")
        assert kettle.rating == 3.5
        assert kettle.review_count == 2
        assert products.get_by_id("2").review_count == 0

    def test_review_from_order(self, products, reviews, orders, clock):
        dto = AddReviewHandler(products, reviews, orders, clock=clock).handle(
            "1", "Olga", 4, TEXT, order_id=1
        )
        assert dto.order_id == 1
        assert products.get_by_id("1").rating == 4.0

    def test_rating_out_of_range_changes_nothing(self, products, reviews, orders, clock):
        handler = AddReviewHandler(products, reviews, orders, clock=clock)
        with pytest.raises(ValidationError, match="between 1 and 5"):
            handler.handle("1", "Olga", 6, TEXT)
        assert reviews.list_for_product("1") == []
        assert products.get_by_id("1").rating == 0.0

    def test_unknown_product(self, products, reviews, orders, clock):
        with pytest.raises(EntityNotFoundError):
            AddReviewHandler(products, reviews, orders, clock=clock).handle(
                "9", "Olga", 4, TEXT
            )

    def test_unknown_order(self, products, reviews, orders, clock):
        with pytest.raises(EntityNotFoundError, match="Order #7 not found"):
            AddReviewHandler(products, reviews, orders, clock=clock).handle(
                "1", "Olga", 4, TEXT, order_id=7
            )

    def test_order_without_the_product(self, products, reviews, orders, clock):
        with pytest.raises(ValidationError, match="does not contain 'Toaster'"):
            AddReviewHandler(products, reviews, orders, clock=clock).handle(
                "2", "Olga", 4, TEXT, order_id=1
            )

    def test_second_review_from_same_order_rejected(self, products, reviews, orders, clock):
        handler = AddReviewHandler(products, reviews, orders, clock=clock)
        handler.handle("1", "Olga", 4, TEXT, order_id=1)
        with pytest.raises(ValidationError, match="already reviewed 'Kettle' from order #1"):
            handler.handle("1", "OLGA", 1, TEXT, order_id=1)
        assert products.get_by_id("1").rating == 4.0
        assert products.get_by_id("1").review_count == 1

    def test_same_author_may_review_another_order(self, products, reviews, orders, clock):
        handler = AddReviewHandler(products, reviews, orders, clock=clock)
        handler.handle("1", "Olga", 4, TEXT, order_id=1)
        handler.handle("1", "Olga", 2, TEXT)
        assert products.get_by_id("1").review_count == 2


class TestListReviews:

    def test_newest_first_with_stats(self, products, reviews, orders, now):
        AddReviewHandler(products, reviews, orders, clock=lambda: now).handle(
            "1", "Olga", 5, TEXT
        )
        later = now + timedelta(days=2)
        AddReviewHandler(products, reviews, orders, clock=lambda: later).handle(
            "1", "Ivan", 3, TEXT
        )

        dto = ListReviewsHandler(products, reviews).handle("1")
        assert dto.product_name == "Kettle"
        assert [r.author for r in dto.reviews] == ["Ivan", "Olga"]
        assert dto.average_rating == 4.0
        assert dto.total_reviews == 2
        assert dto.distribution == {5: 1, 4: 0, 3: 1, 2: 0, 1: 0}

    def test_no_reviews(self, products, reviews):
        dto = ListReviewsHandler(products, reviews).handle("2")
        assert dto.reviews == []
        assert dto.average_rating == 0.0

    def test_unknown_product(self, products, reviews):
        with pytest.raises(EntityNotFoundError):
            ListReviewsHandler(products, reviews).handle("9")
