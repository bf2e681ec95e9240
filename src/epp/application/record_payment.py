"""Application service: Record Payment use case."""

from __future__ import annotations

from datetime import date

import structlog

from epp.application.dto import TransactionSummaryDTO
from epp.application.mapping import transaction_to_dto
from epp.domain.exceptions import EntityNotFoundError
from epp.domain.model.transaction import PaymentRecord
from epp.domain.model.value_objects import Money
from epp.domain.repository.transaction_repository import TransactionRepository


class RecordPaymentHandler:

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        log: structlog.BoundLogger | None = None,
    ) -> None:
        self._transaction_repo = transaction_repo
        if log is None:
            log = structlog.get_logger().bind(module="record_payment")
        self._log = log

    def handle(
        self,
        order_id: str,
        installment_id: str,
        amount: str,
        payroll_batch_id: str | None = None,
        payroll_reference: str | None = None,
        payroll_date: date | None = None,
        processed_by: str | None = None,
        notes: str | None = None,
    ) -> TransactionSummaryDTO:
        txn = self._transaction_repo.get_by_order_id(order_id)
        if txn is None:
            raise EntityNotFoundError(f"Transaction not found for order {order_id}")

        txn.record_payment(
            PaymentRecord(
                installment_id=installment_id,
                amount=Money.of(amount),
                payroll_batch_id=payroll_batch_id,
                payroll_reference=payroll_reference,
                payroll_date=payroll_date,
                processed_by=processed_by,
                notes=notes,
            )
        )
        self._transaction_repo.save(txn)

        self._log.info(
            "payment_recorded",
            order_id=order_id,
            amount=amount,
            paid=str(txn.paid_amount.amount),
            total=str(txn.total_amount.amount),
            balance=str(txn.balance),
            status=txn.status.value,
        )
        return transaction_to_dto(txn)
