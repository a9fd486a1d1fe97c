"""Application service: Show Cart use case."""

from __future__ import annotations

from collections.abc import Iterable

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.domain.model.cart import CartItem, ShoppingCart


class ShowCartHandler:

    def handle(self, cart: ShoppingCart) -> CartDTO:
        snapshot = cart.snapshot()
        return CartDTO(
            id=cart.id,
            items=to_line_dtos(snapshot.items),
            item_count=snapshot.item_count,
            discount_code=snapshot.discount_code,
            subtotal=str(snapshot.subtotal),
            discount=str(snapshot.discount_amount),
            total=str(snapshot.total),
        )


def to_line_dtos(items: Iterable[CartItem]) -> list[CartLineDTO]:
    return [
        CartLineDTO(
            product_id=item.product.id,
            product_name=item.product.name,
            category=item.product.category.value,
            quantity=item.quantity.value,
            unit_price=item.product.display_price,
            line_total=str(item.subtotal),
        )
        for item in items
    ]
