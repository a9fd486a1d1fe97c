"""Application service: Checkout use case.

Turns the current contents of a cart into an Order. The cart is the only
input; products have already been resolved by whoever filled it.
"""

from __future__ import annotations

import structlog

from shopcart.application.dto import OrderDTO
from shopcart.application.show_cart import to_line_dtos
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.order import Order
from shopcart.domain.model.value_objects import Address

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, clear_cart: bool = True) -> None:
        self._clear_cart = clear_cart

    def handle(self, cart: ShoppingCart, shipping_address: Address) -> OrderDTO:
        """Check out *cart* to *shipping_address*.

        Steps:
        1. Refuse to check out an empty cart.
        2. Freeze the cart into an Order (items and totals snapshot).
        3. Empty the cart, if configured to.
        4. Return a DTO.
        """
        with cart.lock:
            if cart.is_empty:
                raise ValidationError("Cannot check out an empty cart")
            order = Order.create_from_cart(cart, shipping_address)
            if self._clear_cart:
                cart.clear_cart()

        logger.info(
            "order_created",
            order_id=order.id,
            cart_id=cart.id,
            item_count=order.item_count,
            total=str(order.total),
            discount_code=order.discount_code,
        )
        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            items=to_line_dtos(order.items),
            item_count=order.item_count,
            discount_code=order.discount_code,
            subtotal=str(order.subtotal),
            discount=str(order.discount_amount),
            total=str(order.total),
            shipping_address=order.shipping_address.formatted,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
