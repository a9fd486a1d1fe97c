"""Composition root — wires concrete implementations together.

This is the only place that decides which discount policy a new cart
gets. Everything else receives its collaborators as arguments.
"""

from __future__ import annotations

from shopcart.application.checkout import CheckoutHandler
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.discount import DEFAULT_DISCOUNT_RATES, TableDiscountPolicy

# Codes accepted by carts created through this module.
DISCOUNT_RATES = DEFAULT_DISCOUNT_RATES


def discount_policy() -> TableDiscountPolicy:
    return TableDiscountPolicy(DISCOUNT_RATES)


def new_cart() -> ShoppingCart:
    return ShoppingCart(discount_policy=discount_policy())


def checkout_handler() -> CheckoutHandler:
    return CheckoutHandler(clear_cart=True)
