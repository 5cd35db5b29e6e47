"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from btshop.domain.exceptions import ValidationError
from btshop.domain.model.category import ProductCategory, slugify
from btshop.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, slug: str | None = None) -> ProductCategory:
        """Add a catalog category.

        The slug is derived from the name unless given. Names (case
        insensitive) and slugs must be unique.
        """
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        name = name.strip()

        slug = slugify(slug if slug else name)
        if not slug:
            raise ValidationError(f"Cannot derive a slug from '{name}'")

        categories = self._category_repo.list_all()
        for existing in categories:
            if existing.name.lower() == name.lower():
                raise ValidationError(f"Category '{name}' already exists")
            if existing.slug == slug:
                raise ValidationError(f"Slug '{slug}' is already taken")

        numeric_ids = [int(c.id) for c in categories if c.id.isdigit()]
        category = ProductCategory(
            id=str(max(numeric_ids, default=0) + 1), name=name, slug=slug
        )
        self._category_repo.save(category)
        logger.info("Category '%s' added as /%s", category.name, category.slug)
        return category
