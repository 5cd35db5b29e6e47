"""Unit tests for reviews and rating summaries."""

import pytest

from btshop.domain.exceptions import ValidationError
from btshop.domain.model.product import Product
from btshop.domain.model.review import RatingSummary, Review
from btshop.domain.model.value_objects import Money

TEXT = "Boils quickly and quietly."


def _review(rating: int, now, author: str = "Olga", order_id=None) -> Review:
    return Review.create("1", author, rating, TEXT, now, order_id=order_id)


class TestReviewCreate:

    def test_strips_input(self, now):
        review = Review.create("1", "  Olga ", 5, f"  {TEXT}  ", now)
        assert review.id is None
        assert review.author == "Olga"
        assert review.text == TEXT
        assert review.created_at == now

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range(self, now, rating):
        with pytest.raises(ValidationError, match="between 1 and 5"):
            _review(rating, now)

    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_bounds_accepted(self, now, rating):
        assert _review(rating, now).rating == rating

    def test_author_required(self, now):
        with pytest.raises(ValidationError, match="Reviewer name is required"):
            Review.create("1", " ", 4, TEXT, now)

    def test_empty_text(self, now):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Review.create("1", "Olga", 4, "   ", now)

    def test_short_text(self, now):
        with pytest.raises(ValidationError, match="at least 10 characters"):
            Review.create("1", "Olga", 4, "  Good!   ", now)


class TestSameReviewer:

    def test_same_author_and_order(self, now):
        review = _review(4, now, order_id=3)
        assert review.same_reviewer("olga ", 3)
        assert not review.same_reviewer("Olga", 4)
        assert not review.same_reviewer("Ivan", 3)

    def test_reviews_without_order(self, now):
        review = _review(4, now)
        assert review.same_reviewer("Olga", None)
        assert not review.same_reviewer("Olga", 3)


class TestRatingSummary:

    def test_no_reviews(self):
        summary = RatingSummary.of([])
        assert summary.average == 0.0
        assert summary.total == 0
        assert summary.distribution == {5: 0, 4: 0, 3: 0, 2: 0, 1: 0}

    def test_average_and_distribution(self, now):
        summary = RatingSummary.of([_review(5, now), _review(4, now), _review(4, now)])
        assert summary.average == pytest.approx(13 / 3)
        assert summary.total == 3
        assert summary.distribution[4] == 2
        assert list(summary.distribution) == [5, 4, 3, 2, 1]

    def test_product_records_rating(self, now):
        product = Product(id="1", name="Kettle", price=Money.of("2500"))
        product.record_rating(RatingSummary.of([_review(5, now), _review(2, now)]))
        assert product.rating == 3.5
        assert product.review_count == 2
