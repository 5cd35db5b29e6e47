"""Abstract repository for ProductCategory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from btshop.domain.model.category import ProductCategory


class CategoryRepository(ABC):

    @abstractmethod
    def get(self, key: str) -> ProductCategory | None:
        """Return a category by ID or slug, or None."""

    @abstractmethod
    def list_all(self) -> list[ProductCategory]:
        """Return every category."""

    @abstractmethod
    def save(self, category: ProductCategory) -> None:
        """Persist a new or updated category."""
