"""Application service: List Reviews query."""

from __future__ import annotations

from btshop.application.dto import ReviewListDTO
from btshop.application.mappers import review_to_dto
from btshop.domain.exceptions import EntityNotFoundError
from btshop.domain.model.review import RatingSummary
from btshop.domain.repository.product_repository import ProductRepository
from btshop.domain.repository.review_repository import ReviewRepository


class ListReviewsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo

    def handle(self, product_id: str) -> ReviewListDTO:
        """Return a product's reviews, newest first, with rating statistics."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        reviews = self._review_repo.list_for_product(product_id)
        summary = RatingSummary.of(reviews)
        return ReviewListDTO(
            product_id=product.id,
            product_name=product.name,
            reviews=[review_to_dto(r) for r in reviews],
            average_rating=summary.average,
            total_reviews=summary.total,
            distribution=summary.distribution,
        )
