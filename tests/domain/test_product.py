"""Unit tests for the Product catalog item."""

import dataclasses
from decimal import Decimal

import pytest

from shopcart.domain.exceptions import InvalidPriceError, ValidationError
from shopcart.domain.model.product import Category, Product
from shopcart.domain.model.value_objects import Money


class TestProductCreation:

    def test_happy_path(self):
        product = Product.create("MacBook Air", "1200", Category.ELECTRONICS, "Apple laptop")
        assert product.name == "MacBook Air"
        assert product.price == Money.of("1200")
        assert product.category is Category.ELECTRONICS
        assert product.description == "Apple laptop"

    def test_id_generated_when_omitted(self):
        a = Product.create("Widget", "1", Category.FOOD)
        b = Product.create("Widget", "1", Category.FOOD)
        assert a.id and b.id
        assert a.id != b.id

    def test_explicit_id_kept(self):
        product = Product.create("Widget", "1", Category.FOOD, id="sku-1")
        assert product.id == "sku-1"

    def test_description_defaults_to_empty(self):
        assert Product.create("Widget", "1", Category.FOOD).description == ""

    @pytest.mark.parametrize("price", ["0.01", 1, 45, Decimal("1200"), 9.99, Money.of("3")])
    def test_positive_prices_accepted(self, price):
        product = Product.create("Widget", price, Category.CLOTHING)
        assert product.price.amount > 0

    @pytest.mark.parametrize("price", ["0", 0, "-1", -0.01, Decimal("-45")])
    def test_non_positive_prices_rejected(self, price):
        with pytest.raises(InvalidPriceError, match="greater than zero"):
            Product.create("Widget", price, Category.CLOTHING)

    def test_zero_money_rejected(self):
        with pytest.raises(InvalidPriceError):
            Product.create("Widget", Money.zero(), Category.BOOKS)

    def test_unparsable_price_rejected(self):
        with pytest.raises(InvalidPriceError, match="Invalid price"):
            Product.create("Widget", "cheap", Category.BOOKS)

    def test_nan_price_rejected(self):
        with pytest.raises(InvalidPriceError):
            Product.create("Widget", "NaN", Category.BOOKS)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("   ", "1", Category.BOOKS)


class TestProductBehaviour:

    def test_display_price_has_two_decimals(self):
        assert Product.create("Book", "45", Category.BOOKS).display_price == "$45.00"
        assert Product.create("Gum", "0.5", Category.FOOD).display_price == "$0.50"

    def test_immutable(self):
        product = Product.create("Book", "45", Category.BOOKS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.name = "Other"  # type: ignore[misc]


class TestCategory:

    def test_parse_is_case_insensitive(self):
        assert Category.parse(" Books ") is Category.BOOKS

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Category.parse("toys")

    def test_closed_set(self):
        assert {c.value for c in Category} == {"electronics", "clothing", "food", "books"}


class TestProductConstructor:

    def test_direct_construction_with_zero_price_rejected(self):
        with pytest.raises(InvalidPriceError, match="greater than zero"):
            Product(id="x", name="Widget", price=Money.zero(), category=Category.FOOD)

    def test_direct_construction_with_raw_price_rejected(self):
        with pytest.raises(InvalidPriceError):
            Product(id="x", name="Widget", price=Decimal("5"), category=Category.FOOD)

    def test_direct_construction_with_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id="x", name="", price=Money.of("5"), category=Category.FOOD)

    def test_direct_construction_with_unknown_category_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Product(id="x", name="Widget", price=Money.of("5"), category="toys")

    def test_direct_construction_happy_path(self):
        product = Product(id="x", name="Widget", price=Money.of("5"), category=Category.FOOD)
        assert product.display_price == "$5.00"
