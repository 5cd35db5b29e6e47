"""JSON-file-backed implementation of ReviewRepository."""

from __future__ import annotations

import json
from pathlib import Path

from btshop.domain.model.review import Review
from btshop.domain.repository.review_repository import ReviewRepository
from btshop.infrastructure.persistence.dates import format_datetime, parse_datetime


class JsonReviewRepository(ReviewRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def list_for_product(self, product_id: str) -> list[Review]:
        reviews = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["product_id"] == product_id
        ]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

    def save(self, review: Review) -> None:
        reviews = self._load_raw()

        if review.id is None:
            review.id = max((r["id"] for r in reviews), default=0) + 1

        reviews = [r for r in reviews if r["id"] != review.id]
        reviews.append(self._to_raw(review))
        self._file_path.write_text(
            json.dumps(reviews, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_raw(review: Review) -> dict:
        return {
            "id": review.id,
            "product_id": review.product_id,
            "author": review.author,
            "rating": review.rating,
            "text": review.text,
            "order_id": review.order_id,
            "created_at": format_datetime(review.created_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Review:
        return Review(
            id=raw["id"],
            product_id=raw["product_id"],
            author=raw["author"],
            rating=int(raw["rating"]),
            text=raw["text"],
            order_id=raw.get("order_id"),
            created_at=parse_datetime(raw["created_at"]),
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
