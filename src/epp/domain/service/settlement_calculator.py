"""Domain service: Order Settlement Calculator.

Turns requested line items into priced items and order totals.

Items are processed strictly in input order, one price lookup at a time,
so the first item that cannot be priced is the one reported. Any failure
aborts the whole calculation; no partial totals are ever returned.

Rounding: item subtotals are kept at full precision. The four
order-level figures are each rounded to cents from the *unrounded*
running sums, so ``tax`` is derived from the raw subtotal rather than
the rounded one and ``total`` may differ by a cent from
``subtotal + tax`` as displayed.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

import structlog

from epp.domain.exceptions import NoValidPrice, ProductNotFound
from epp.domain.model.settlement import LineItemRequest, OrderTotals, ResolvedLineItem
from epp.domain.model.value_objects import DEFAULT_TAX_RATE, Money, TaxRate
from epp.domain.repository.price_lookup import PriceLookup


class OrderSettlementCalculator:

    def __init__(
        self,
        price_lookup: PriceLookup,
        log: structlog.BoundLogger | None = None,
    ) -> None:
        self._price_lookup = price_lookup
        if log is None:
            log = structlog.get_logger().bind(module="settlement_calculator")
        self._log = log

    def compute(
        self,
        line_items: Iterable[LineItemRequest],
        tax_rate: TaxRate = DEFAULT_TAX_RATE,
    ) -> OrderTotals:
        try:
            return self._compute(line_items, tax_rate)
        except Exception as exc:
            self._log.error("order_totals_failed", error=str(exc))
            raise

    # --- Internal steps -------------------------------------------------------

    def _compute(
        self,
        line_items: Iterable[LineItemRequest],
        tax_rate: TaxRate,
    ) -> OrderTotals:
        resolved: list[ResolvedLineItem] = []
        order_subtotal = Money.zero()
        order_discount = Money.zero()

        for request in line_items:
            item = self._resolve_item(request)
            resolved.append(item)
            order_subtotal += item.subtotal
            order_discount += item.discount

        tax = Money(order_subtotal.amount * tax_rate.value, order_subtotal.currency)
        total = order_subtotal + tax

        totals = OrderTotals(
            items=resolved,
            subtotal=order_subtotal.rounded(),
            discount=order_discount.rounded(),
            tax=tax.rounded(),
            total=total.rounded(),
        )

        self._log.info(
            "order_totals_computed",
            items=len(resolved),
            subtotal=str(totals.subtotal.amount),
            discount=str(totals.discount.amount),
            tax=str(totals.tax.amount),
            total=str(totals.total.amount),
        )
        return totals

    def _resolve_item(self, request: LineItemRequest) -> ResolvedLineItem:
        unit_price = self._resolve_price(request)
        discount = request.discount if request.discount is not None else Money.zero()

        gross = unit_price * request.quantity.value
        raw = gross.amount - discount.amount
        subtotal = Money(max(Decimal("0"), raw))

        self._log.debug(
            "line_item_computed",
            product_ref=request.product_ref,
            quantity=request.quantity.value,
            unit_price=str(unit_price.amount),
            discount=str(discount.amount),
            subtotal=str(subtotal.amount),
        )

        return ResolvedLineItem(
            product_ref=request.product_ref,
            quantity=request.quantity,
            unit_price=unit_price,
            discount=discount,
            subtotal=subtotal,
        )

    def _resolve_price(self, request: LineItemRequest) -> Money:
        if request.has_explicit_price:
            return request.unit_price  # type: ignore[return-value]

        pricing = self._price_lookup.find_product_pricing(request.product_ref)
        if pricing is None:
            raise ProductNotFound(request.product_ref)

        price = pricing.effective_price()
        if price.is_zero:
            raise NoValidPrice(request.product_ref)

        self._log.info(
            "price_resolved",
            product_ref=request.product_ref,
            unit_price=str(price.amount),
            employee_price=_amount_or_none(pricing.employee_price),
            retail_price=_amount_or_none(pricing.retail_price),
        )
        return price


def compute_order_totals(
    price_lookup: PriceLookup,
    line_items: Iterable[LineItemRequest],
    tax_rate: TaxRate = DEFAULT_TAX_RATE,
    log: structlog.BoundLogger | None = None,
) -> OrderTotals:
    """One-shot form of ``OrderSettlementCalculator(...).compute(...)``."""
    return OrderSettlementCalculator(price_lookup, log=log).compute(line_items, tax_rate)


def _amount_or_none(price: Money | None) -> str | None:
    return str(price.amount) if price is not None else None
