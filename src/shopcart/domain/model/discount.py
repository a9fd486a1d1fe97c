"""Discount policies — resolve a discount code to a fractional rate.

A policy is any callable ``code -> Decimal`` returning a rate between 0
and 1. The cart only ever calls the policy, so new codes or entirely
different rules can be plugged in without touching the cart.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError

DiscountPolicy = Callable[[str], Decimal]

NO_DISCOUNT = Decimal("0")

DEFAULT_DISCOUNT_RATES: dict[str, Decimal] = {
    "SAVE10": Decimal("0.10"),
    "SAVE20": Decimal("0.20"),
}


def validate_rate(code: str, rate: Decimal) -> Decimal:
    if not isinstance(rate, Decimal):
        raise ValidationError(
            f"Discount rate for '{code}' must be a Decimal, got {type(rate).__name__}"
        )
    if not rate.is_finite() or rate < 0 or rate > 1:
        raise ValidationError(
            f"Discount rate for '{code}' must be between 0 and 1, got {rate}"
        )
    return rate


class TableDiscountPolicy:
    """Closed lookup table of discount codes.

    Codes are matched exactly. Unknown codes resolve to no discount
    rather than an error.
    """

    def __init__(self, rates: Mapping[str, Decimal] | None = None) -> None:
        source = DEFAULT_DISCOUNT_RATES if rates is None else rates
        self._rates = {code: validate_rate(code, rate) for code, rate in source.items()}

    def __call__(self, code: str) -> Decimal:
        return self._rates.get(code, NO_DISCOUNT)

    @property
    def rates(self) -> dict[str, Decimal]:
        return dict(sorted(self._rates.items()))
