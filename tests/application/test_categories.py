"""Integration tests for the category use cases."""

import pytest

from btshop.application.add_category import AddCategoryHandler
from btshop.application.add_product import AddProductHandler
from btshop.application.list_categories import ListCategoriesHandler
from btshop.domain.exceptions import ValidationError
from btshop.domain.model.category import ProductCategory
from btshop.domain.model.product import Product
from btshop.domain.model.value_objects import Money
from tests.fakes import FakeCategoryRepository, FakeProductRepository


def _repo() -> FakeCategoryRepository:
    return FakeCategoryRepository(
        [ProductCategory(id="1", name="Kitchen", slug="kitchen")]
    )


class TestAddCategory:

    def test_derives_slug_and_id(self):
        repo = _repo()
        category = AddCategoryHandler(repo).handle("Стиральные машины")
        assert category.id == "2"
        assert category.slug == "stiralnye-mashiny"
        assert repo.get("stiralnye-mashiny") == category

    def test_explicit_slug_is_normalised(self):
        category = AddCategoryHandler(_repo()).handle("Холодильники", slug="Fridges")
        assert category.slug == "fridges"

    def test_new_category_usable_for_products(self, clock):
        categories = _repo()
        AddCategoryHandler(categories).handle("Televisions")
        products = FakeProductRepository()
        product = AddProductHandler(products, categories, clock=clock).handle(
            "OLED 55", "89990", category="televisions"
        )
        assert product.category_id == "2"

    def test_skips_non_numeric_ids(self):
        repo = FakeCategoryRepository(
            [ProductCategory(id="65a1f0c2e4b0a1b2c3d4e5f6", name="Kitchen", slug="kitchen")]
        )
        assert AddCategoryHandler(repo).handle("Audio").id == "1"

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddCategoryHandler(_repo()).handle("  ")

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddCategoryHandler(_repo()).handle("KITCHEN")

    def test_duplicate_slug_rejected(self):
        with pytest.raises(ValidationError, match="already taken"):
            AddCategoryHandler(_repo()).handle("Kitchen appliances", slug="kitchen")

    def test_unsluggable_name_rejected(self):
        with pytest.raises(ValidationError, match="Cannot derive a slug"):
            AddCategoryHandler(_repo()).handle("???")


class TestListCategories:

    def test_sorted_with_active_product_counts(self):
        categories = _repo()
        categories.save(ProductCategory(id="2", name="Audio", slug="audio"))
        products = FakeProductRepository([
            Product(id="1", name="Kettle", price=Money.of("2500"), category_id="1"),
            Product(id="2", name="Toaster", price=Money.of("3490"), category_id="1"),
            Product(
                id="3", name="Mixer", price=Money.of("990"), category_id="1",
                is_active=False,
            ),
        ])
        listed = ListCategoriesHandler(categories, products).handle()
        assert [(c.name, c.product_count) for c in listed] == [
            ("Audio", 0),
            ("Kitchen", 2),
        ]
