"""Product — an immutable catalog item.

Products are created once and never change. A price change in the
catalog means a new Product value, so carts and orders holding the old
one keep the price they were built with.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from shopcart.domain.exceptions import InvalidPriceError, ValidationError
from shopcart.domain.model.value_objects import Money, to_decimal


class Category(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    FOOD = "food"
    BOOKS = "books"

    @classmethod
    def parse(cls, raw: str) -> Category:
        """Look up a category by name, ignoring case and surrounding spaces."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise ValidationError(
                f"Unknown category '{raw}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products: it generates an ID and
    enforces the positive-price invariant.
    """

    id: str
    name: str
    price: Money
    category: Category
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money) or self.price.amount <= 0:
            raise InvalidPriceError(
                f"Product price must be a Money greater than zero, got {self.price!r}"
            )
        if not isinstance(self.category, Category):
            raise ValidationError(f"Unknown category {self.category!r}")

    @staticmethod
    def create(
        name: str,
        price: Money | Decimal | str | int | float,
        category: Category,
        description: str = "",
        id: str | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        return Product(
            id=id or str(uuid.uuid4()),
            name=name.strip(),
            price=_positive_price(price),
            category=category,
            description=description or "",
        )

    @property
    def display_price(self) -> str:
        return str(self.price)


def _positive_price(price: Money | Decimal | str | int | float) -> Money:
    if isinstance(price, Money):
        amount, currency = price.amount, price.currency
    else:
        try:
            amount = to_decimal(price)
        except ValidationError as exc:
            raise InvalidPriceError(f"Invalid price: {price!r}") from exc
        currency = "USD"

    if not amount.is_finite() or amount <= 0:
        raise InvalidPriceError(
            f"Product price must be greater than zero, got {price}"
        )
    return Money(amount, currency)
