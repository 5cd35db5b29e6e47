"""Application service: Add Review use case.

1. The product must exist; a referenced order must exist and contain it.
2. One review per reviewer, product and order.
3. Save the review, then recompute the product's average rating and
   review count from all of its reviews.
"""

from __future__ import annotations

import logging

from btshop.application.clock import Clock, utc_now
from btshop.application.dto import ReviewDTO
from btshop.application.mappers import review_to_dto
from btshop.domain.exceptions import EntityNotFoundError, ValidationError
from btshop.domain.model.review import RatingSummary, Review
from btshop.domain.repository.order_repository import OrderRepository
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.repository.review_repository import ReviewRepository

logger = logging.getLogger(__name__)


class AddReviewHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
        order_repo: OrderRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo
        self._order_repo = order_repo
        self._clock = clock

    def handle(
        self,
        product_id: str,
        author: str,
        rating: int,
        text: str,
        order_id: int | None = None,
    ) -> ReviewDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if order_id is not None:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            if all(item.product_id != product_id for item in order.items):
                raise ValidationError(
                    f"Order #{order_id} does not contain '{product.name}'"
                )

        review = Review.create(
            product_id=product_id,
            author=author,
            rating=rating,
            text=text,
            now=self._clock(),
            order_id=order_id,
        )

        reviews = self._review_repo.list_for_product(product_id)
        if any(r.same_reviewer(review.author, order_id) for r in reviews):
            raise ValidationError(
                f"{review.author} has already reviewed '{product.name}'"
                + (f" from order #{order_id}" if order_id is not None else "")
            )

        self._review_repo.save(review)
        summary = RatingSummary.of(reviews + [review])
        product.record_rating(summary)
        self._product_repo.save(product)

        logger.info(
            "Review %d/5 for '%s' saved; rating now %.2f over %d reviews",
            review.rating, product.name, summary.average, summary.total,
        )
        return review_to_dto(review)
