"""Review — a customer's rating and comment on a product.

Reviews are kept apart from the product; the product only carries the
derived average rating and review count, recomputed from all of its
reviews whenever one is added.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from btshop.domain.exceptions import ValidationError

MIN_RATING = 1
MAX_RATING = 5
MIN_TEXT_LENGTH = 10


@dataclass
class Review:
    """Use ``Review.create()`` for new reviews; it validates the input."""

    id: int | None
    product_id: str
    author: str
    rating: int
    text: str
    order_id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_id: str,
        author: str,
        rating: int,
        text: str,
        now: datetime,
        order_id: int | None = None,
    ) -> Review:
        if not author or not author.strip():
            raise ValidationError("Reviewer name is required")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        text = (text or "").strip()
        if not text:
            raise ValidationError("Review text cannot be empty")
        if len(text) < MIN_TEXT_LENGTH:
            raise ValidationError(
                f"Review text must be at least {MIN_TEXT_LENGTH} characters"
            )
        return Review(
            id=None,
            product_id=product_id,
            author=author.strip(),
            rating=rating,
            text=text,
            order_id=order_id,
            created_at=now,
        )

    def same_reviewer(self, author: str, order_id: int | None) -> bool:
        """True if *author* already reviewed this product from *order_id*."""
        return (
            self.order_id == order_id
            and self.author.lower() == author.strip().lower()
        )


@dataclass(frozen=True)
class RatingSummary:
    average: float
    total: int
    distribution: dict[int, int]

    @classmethod
    def of(cls, reviews: list[Review]) -> RatingSummary:
        """Average, count and per-star distribution; zero when unreviewed."""
        distribution = {stars: 0 for stars in range(MAX_RATING, MIN_RATING - 1, -1)}
        for review in reviews:
            distribution[review.rating] += 1
        total = len(reviews)
        average = sum(r.rating for r in reviews) / total if total else 0.0
        return cls(average=average, total=total, distribution=distribution)
