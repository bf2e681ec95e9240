"""Application service: Quote Order use case (query).

Prices a basket without opening a ledger.
"""

from __future__ import annotations

import structlog

from epp.application.dto import LineItemSpec, OrderTotalsDTO
from epp.application.mapping import to_line_item_request, totals_to_dto
from epp.domain.model.value_objects import DEFAULT_TAX_RATE, TaxRate
from epp.domain.repository.price_lookup import PriceLookup
from epp.domain.service.settlement_calculator import OrderSettlementCalculator


class QuoteOrderHandler:

    def __init__(
        self,
        price_lookup: PriceLookup,
        log: structlog.BoundLogger | None = None,
    ) -> None:
        self._calculator = OrderSettlementCalculator(price_lookup, log=log)

    def handle(
        self,
        item_specs: list[LineItemSpec],
        tax_rate: TaxRate = DEFAULT_TAX_RATE,
    ) -> OrderTotalsDTO:
        requests = [to_line_item_request(spec) for spec in item_specs]
        return totals_to_dto(self._calculator.compute(requests, tax_rate))
