"""Application service: Settle Order use case.

Computes the order totals and opens the payment ledger for the
resulting total. This is the only place that coordinates pricing with
the transaction ledger.
"""

from __future__ import annotations

import structlog

from epp.application.dto import LineItemSpec, SettlementDTO
from epp.application.mapping import (
    to_line_item_request,
    totals_to_dto,
    transaction_to_dto,
)
from epp.domain.exceptions import ValidationError
from epp.domain.model.transaction import PaymentMethod, PaymentType, Transaction
from epp.domain.model.value_objects import DEFAULT_TAX_RATE, TaxRate
from epp.domain.repository.price_lookup import PriceLookup
from epp.domain.repository.transaction_repository import TransactionRepository
from epp.domain.service.settlement_calculator import OrderSettlementCalculator


class SettleOrderHandler:

    def __init__(
        self,
        price_lookup: PriceLookup,
        transaction_repo: TransactionRepository,
        log: structlog.BoundLogger | None = None,
    ) -> None:
        self._calculator = OrderSettlementCalculator(price_lookup, log=log)
        self._transaction_repo = transaction_repo
        if log is None:
            log = structlog.get_logger().bind(module="settle_order")
        self._log = log

    def handle(
        self,
        order_id: str,
        employee_id: str,
        item_specs: list[LineItemSpec],
        payment_type: PaymentType = PaymentType.FULL,
        payment_method: PaymentMethod = PaymentMethod.PAYROLL_DEDUCTION,
        tax_rate: TaxRate = DEFAULT_TAX_RATE,
    ) -> SettlementDTO:
        """Settle an order.

        Steps:
        1. Refuse if the order already has a ledger.
        2. Price every line item (fails fast on the first bad item).
        3. Open a ledger for the order total and persist it.
        """
        if self._transaction_repo.get_by_order_id(order_id) is not None:
            raise ValidationError(f"Order {order_id} already has a transaction")

        requests = [to_line_item_request(spec) for spec in item_specs]
        totals = self._calculator.compute(requests, tax_rate)

        txn = Transaction.open(
            order_id=order_id,
            employee_id=employee_id,
            total_amount=totals.total,
            payment_type=payment_type,
            payment_method=payment_method,
        )
        self._transaction_repo.save(txn)

        self._log.info(
            "transaction_opened",
            order_id=order_id,
            transaction_number=txn.transaction_number,
            type=txn.type.value,
            total=str(txn.total_amount.amount),
        )

        return SettlementDTO(
            totals=totals_to_dto(totals),
            transaction=transaction_to_dto(txn),
        )
