"""Order — the immutable result of checking out a cart.

An Order is created exactly once from a cart and a shipping address and
never changes afterwards. It keeps its own frozen copies of the cart
lines and the totals as they were at checkout time, so whatever happens
to the cart later has no effect on it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcart.domain.model.cart import CartItem, ShoppingCart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Address, Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """A cart line frozen at checkout time."""

    product: Product
    quantity: Quantity

    @staticmethod
    def from_cart_item(item: CartItem) -> OrderLine:
        return OrderLine(product=item.product, quantity=item.quantity)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value

    def to_cart_item(self) -> CartItem:
        return CartItem(product=self.product, quantity=self.quantity)


@dataclass(frozen=True)
class Order:
    """Checkout snapshot of a ShoppingCart.

    Use ``Order.create_from_cart()`` for new orders. ``lines`` holds
    frozen OrderLine values; ``items`` rebuilds them as CartItem copies.
    """

    id: str
    lines: tuple[OrderLine, ...] = field(repr=False)
    subtotal: Money
    discount_amount: Money
    total: Money
    shipping_address: Address
    discount_code: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create_from_cart(cart: ShoppingCart, shipping_address: Address) -> Order:
        """Freeze the current state of *cart* into a new order."""
        snapshot = cart.snapshot()
        return Order(
            id=str(uuid.uuid4()),
            lines=tuple(OrderLine.from_cart_item(item) for item in snapshot.items),
            subtotal=snapshot.subtotal,
            discount_amount=snapshot.discount_amount,
            total=snapshot.total,
            shipping_address=shipping_address,
            discount_code=snapshot.discount_code,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(line.to_cart_item() for line in self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
