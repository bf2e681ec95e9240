"""Application service: Reconcile Transaction use case."""

from __future__ import annotations

import structlog

from epp.application.dto import TransactionSummaryDTO
from epp.application.mapping import transaction_to_dto
from epp.domain.exceptions import EntityNotFoundError
from epp.domain.repository.transaction_repository import TransactionRepository


class ReconcileTransactionHandler:

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        log: structlog.BoundLogger | None = None,
    ) -> None:
        self._transaction_repo = transaction_repo
        if log is None:
            log = structlog.get_logger().bind(module="reconcile_transaction")
        self._log = log

    def handle(
        self,
        order_id: str,
        reconciled_by: str,
        notes: str | None = None,
    ) -> TransactionSummaryDTO:
        txn = self._transaction_repo.get_by_order_id(order_id)
        if txn is None:
            raise EntityNotFoundError(f"Transaction not found for order {order_id}")

        txn.reconcile(reconciled_by=reconciled_by, notes=notes)
        self._transaction_repo.save(txn)

        self._log.info(
            "transaction_reconciled",
            order_id=order_id,
            reconciled_by=reconciled_by,
        )
        return transaction_to_dto(txn)
