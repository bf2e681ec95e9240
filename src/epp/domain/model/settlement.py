"""Settlement model: what the caller asks for and what the calculator returns.

All of these are transient; they are built per calculation and never
persisted by the calculator itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from epp.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItemRequest:
    """One requested line: a product reference, a quantity and optional
    explicit price and discount.

    A missing (or zero) ``unit_price`` means "look it up".
    """

    product_ref: str
    quantity: Quantity
    unit_price: Money | None = None
    discount: Money | None = None

    @property
    def has_explicit_price(self) -> bool:
        return self.unit_price is not None and not self.unit_price.is_zero


@dataclass(frozen=True)
class ResolvedLineItem:
    product_ref: str
    quantity: Quantity
    unit_price: Money
    discount: Money
    subtotal: Money  # not rounded; floored at zero


@dataclass(frozen=True)
class OrderTotals:
    """Order-level figures, each rounded to cents independently.

    ``discount`` is the sum of requested discounts, including any part
    that was absorbed by flooring an item subtotal at zero.
    """

    items: list[ResolvedLineItem] = field(default_factory=list)
    subtotal: Money = field(default_factory=Money.zero)
    discount: Money = field(default_factory=Money.zero)
    tax: Money = field(default_factory=Money.zero)
    total: Money = field(default_factory=Money.zero)
