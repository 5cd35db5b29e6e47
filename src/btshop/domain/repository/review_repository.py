"""Abstract repository for product reviews."""

from __future__ import annotations

from abc import ABC, abstractmethod

from btshop.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Review]:
        """Return a product's reviews, newest first."""

    @abstractmethod
    def save(self, review: Review) -> None:
        """Persist a review, assigning an ID to a new one."""
