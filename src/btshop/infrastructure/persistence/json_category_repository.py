"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

import json
from pathlib import Path

from btshop.domain.model.category import ProductCategory
from btshop.domain.repository.category_repository import CategoryRepository


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get(self, key: str) -> ProductCategory | None:
        for category in self.list_all():
            if category.matches(key):
                return category
        return None

    def list_all(self) -> list[ProductCategory]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [
            ProductCategory(id=item["id"], name=item["name"], slug=item["slug"])
            for item in raw
        ]

    def save(self, category: ProductCategory) -> None:
        categories = {c.id: c for c in self.list_all()}
        categories[category.id] = category
        raw = [
            {"id": c.id, "name": c.name, "slug": c.slug}
            for c in categories.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
