"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product to put in the cart, described by the user."""

    product_name: str
    price: str
    quantity: int
    category: str = "electronics"
    description: str = ""


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart or order line as displayed to the user."""

    product_id: str
    product_name: str
    category: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the current state of a cart."""

    id: str
    items: list[CartLineDTO]
    item_count: int
    discount_code: str | None
    subtotal: str
    discount: str
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    items: list[CartLineDTO]
    item_count: int
    discount_code: str | None
    subtotal: str
    discount: str
    total: str
    shipping_address: str
    created_at: str
