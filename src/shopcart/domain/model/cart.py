"""ShoppingCart aggregate and its CartItem lines.

The cart is an entity with reference semantics: every holder of the same
instance sees every mutation. Its lines are values: the cart never hands
out its own CartItem objects, only copies, so nothing outside the cart
can change a line behind its back.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from decimal import Decimal

import structlog

from shopcart.domain.model.discount import (
    NO_DISCOUNT,
    DiscountPolicy,
    TableDiscountPolicy,
    validate_rate,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity

logger = structlog.get_logger(__name__)


@dataclass
class CartItem:
    """A product and how many units of it are in the cart.

    Mutable only via ``set_quantity()`` and ``increase_by()``. Behaves
    as a value: ``copy()`` returns an independent item.
    """

    product: Product
    quantity: Quantity

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, Quantity):
            self.quantity = Quantity(self.quantity)

    @staticmethod
    def of(product: Product, quantity: int = 1) -> CartItem:
        """Build a line from a raw int; non-positive quantities are rejected."""
        return CartItem(product=product, quantity=Quantity(quantity))

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value

    def set_quantity(self, new_quantity: int) -> None:
        """Replace the quantity.

        Raises InvalidQuantityError for zero or negative values and leaves
        the item unchanged. Removing a line is the cart's job.
        """
        self.quantity = Quantity(new_quantity)

    def increase_by(self, amount: int) -> None:
        """Add *amount* units. Non-positive amounts are ignored."""
        if amount <= 0:
            logger.debug(
                "cart_item_increase_ignored",
                product_id=self.product.id,
                amount=amount,
            )
            return
        self.quantity = self.quantity.plus(amount)

    def copy(self) -> CartItem:
        # Product and Quantity are frozen, so a shallow replace is a full copy.
        return replace(self)

    def __copy__(self) -> CartItem:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> CartItem:
        return self.copy()


@dataclass(frozen=True)
class CartSnapshot:
    """Consistent view of a cart taken under its lock."""

    items: tuple[CartItem, ...]
    subtotal: Money
    discount_code: str | None
    discount_amount: Money
    total: Money

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)


@dataclass(eq=False)
class ShoppingCart:
    """Aggregate root for one shopping session.

    Invariants:
    - at most one line per product ID
    - lines keep the order in which their product was first added

    Compared by identity. Assigning or passing a cart never copies it.
    Mutations and snapshots are serialised on a per-cart lock.
    """

    discount_code: str | None = None
    discount_policy: DiscountPolicy = field(default_factory=TableDiscountPolicy)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    _items: list[CartItem] = field(default_factory=list, init=False, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    # --- Item management ------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*.

        If the product is already in the cart its line grows instead of a
        duplicate line being added.
        """
        requested = Quantity(quantity)
        with self._lock:
            existing = self._find(product.id)
            if existing is not None:
                existing.increase_by(requested.value)
            else:
                self._items.append(CartItem(product=product, quantity=requested))
        logger.debug(
            "cart_item_added",
            cart_id=self.id,
            product_id=product.id,
            quantity=quantity,
        )

    def remove_item(self, product_id: str) -> None:
        """Drop the line for *product_id*; unknown IDs are ignored."""
        with self._lock:
            before = len(self._items)
            self._items = [i for i in self._items if i.product_id != product_id]
            removed = before != len(self._items)
        if removed:
            logger.debug("cart_item_removed", cart_id=self.id, product_id=product_id)

    def update_item_quantity(self, product_id: str, quantity: int) -> None:
        """Set the quantity of an existing line.

        A quantity of 0 removes the line. Negative quantities raise
        InvalidQuantityError. Unknown IDs are ignored.
        """
        with self._lock:
            item = self._find(product_id)
            if item is None:
                return
            if quantity == 0:
                self.remove_item(product_id)
                return
            item.set_quantity(quantity)
        logger.debug(
            "cart_item_quantity_updated",
            cart_id=self.id,
            product_id=product_id,
            quantity=quantity,
        )

    def clear_cart(self) -> None:
        """Remove every line.

        The discount code survives, matching the behaviour carts have
        always had; call ``clear_discount_code()`` to drop it too.
        """
        with self._lock:
            self._items.clear()
        logger.debug("cart_cleared", cart_id=self.id)

    # --- Discount code --------------------------------------------------------

    def apply_discount_code(self, code: str | None) -> None:
        with self._lock:
            self.discount_code = code or None

    def clear_discount_code(self) -> None:
        self.apply_discount_code(None)

    # --- Computed properties --------------------------------------------------

    @property
    def lock(self) -> threading.RLock:
        """Per-cart lock for callers that need several operations to be atomic."""
        return self._lock

    @property
    def items(self) -> tuple[CartItem, ...]:
        with self._lock:
            return tuple(item.copy() for item in self._items)

    def get_item(self, product_id: str) -> CartItem | None:
        with self._lock:
            item = self._find(product_id)
            return item.copy() if item is not None else None

    @property
    def subtotal(self) -> Money:
        with self._lock:
            result = Money.zero()
            for item in self._items:
                result = result + item.subtotal
            return result

    @property
    def discount_rate(self) -> Decimal:
        with self._lock:
            if self.discount_code is None:
                return NO_DISCOUNT
            return validate_rate(
                self.discount_code, self.discount_policy(self.discount_code)
            )

    @property
    def discount_amount(self) -> Money:
        with self._lock:
            return self.subtotal.scaled(self.discount_rate)

    @property
    def total(self) -> Money:
        with self._lock:
            return self.subtotal - self.discount_amount

    @property
    def item_count(self) -> int:
        with self._lock:
            return sum(item.quantity.value for item in self._items)

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def snapshot(self) -> CartSnapshot:
        """Capture items and totals from a single consistent cart state."""
        with self._lock:
            subtotal = self.subtotal
            discount = self.discount_amount
            return CartSnapshot(
                items=self.items,
                subtotal=subtotal,
                discount_code=self.discount_code,
                discount_amount=discount,
                total=subtotal - discount,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __copy__(self) -> ShoppingCart:
        raise TypeError("ShoppingCart is shared by reference and cannot be copied")

    def __deepcopy__(self, memo: dict) -> ShoppingCart:
        raise TypeError("ShoppingCart is shared by reference and cannot be copied")

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartItem | None:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None
