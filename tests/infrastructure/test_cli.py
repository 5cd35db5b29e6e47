"""Smoke tests for the click CLI, run against a temporary data directory."""

import pytest
from click.testing import CliRunner

from btshop.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    monkeypatch.setenv("BTSHOP_DATA_DIR", str(tmp_path))
    return CliRunner()


def _ok(runner: CliRunner, *args: str) -> str:
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestCli:

    def test_shopping_flow(self, runner):
        _ok(runner, "product", "add", "--name", "Kettle", "--price", "1000", "--stock", "2")
        _ok(runner, "product", "discount", "--id", "1", "--value", "20")

        listing = _ok(runner, "catalog", "list", "--discounted")
        assert "Kettle" in listing
        assert "800.00" in listing

        cart = _ok(runner, "cart", "add", "1", "--quantity", "2")
        assert "1 600.00" in cart

        order = _ok(runner, "checkout", "--customer", "Ivan", "--phone", "123")
        assert "status=pending" in order

        detail = _ok(runner, "catalog", "show", "1")
        assert "out of stock" in detail

    def test_add_above_stock_fails(self, runner):
        _ok(runner, "product", "add", "--name", "Kettle", "--price", "1000", "--stock", "2")
        result = runner.invoke(cli, ["cart", "add", "1", "--quantity", "3"])
        assert result.exit_code != 0
        assert "Not enough" in result.output
        assert "Cart is empty." in _ok(runner, "cart", "show")

    def test_unknown_order(self, runner):
        result = runner.invoke(cli, ["order", "show", "--id", "5"])
        assert result.exit_code != 0
        assert "Order #5 not found" in result.output

    def test_categories_and_product_edit(self, runner):
        added = _ok(runner, "catalog", "category-add", "--name", "Чайники")
        assert "added as /chayniki" in added
        result = runner.invoke(cli, ["catalog", "category-add", "--name", "чайники"])
        assert result.exit_code != 0
        assert "already exists" in result.output

        _ok(runner, "product", "add", "--name", "Kettle", "--price", "1000", "--stock", "2")
        _ok(
            runner, "product", "update", "--id", "1", "--name", "Glass kettle",
            "--brand", "Bosch", "--category", "chayniki", "--featured",
        )
        detail = _ok(runner, "catalog", "show", "1")
        assert "Glass kettle" in detail
        assert "Brand:    Bosch" in detail
        assert "Category: Чайники" in detail
        assert "1 000.00" in detail

        listing = _ok(runner, "catalog", "categories")
        assert "/chayniki" in listing
        assert "1 products" in listing

    def test_update_without_changes_fails(self, runner):
        _ok(runner, "product", "add", "--name", "Kettle", "--price", "1000")
        result = runner.invoke(cli, ["product", "update", "--id", "1"])
        assert result.exit_code != 0
        assert "Nothing to update" in result.output

    def test_reviews_set_rating(self, runner):
        _ok(runner, "product", "add", "--name", "Kettle", "--price", "1000")
        _ok(
            runner, "product", "review", "--id", "1", "--author", "Olga",
            "--rating", "5", "--text", "Boils quickly and quietly.",
        )
        _ok(
            runner, "product", "review", "--id", "1", "--author", "Ivan",
            "--rating", "4", "--text", "Good, but the lid is stiff.",
        )

        result = runner.invoke(cli, [
            "product", "review", "--id", "1", "--author", "Petr",
            "--rating", "6", "--text", "Best kettle I ever had.",
        ])
        assert result.exit_code != 0

        reviews = _ok(runner, "product", "reviews", "--id", "1")
        assert "Rating: 4.5 (2 reviews)" in reviews
        assert "Boils quickly" in reviews

        assert "Rating:   4.5 (2 reviews)" in _ok(runner, "catalog", "show", "1")
        assert "Kettle" in _ok(runner, "catalog", "list", "--min-rating", "4.5")
