"""Application service: List Unreconciled Transactions use case (query).

Finance reconciles ledgers once they are fully paid, so only COMPLETED
ledgers that have not been reconciled yet are listed, oldest update first.
"""

from __future__ import annotations

from decimal import Decimal

from epp.application.dto import UnreconciledSummaryDTO
from epp.application.mapping import transaction_to_dto
from epp.domain.model.transaction import TransactionStatus
from epp.domain.model.value_objects import Money
from epp.domain.repository.transaction_repository import TransactionRepository


class ListUnreconciledHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self) -> UnreconciledSummaryDTO:
        pending = sorted(
            (
                txn
                for txn in self._transaction_repo.list_all()
                if txn.status == TransactionStatus.COMPLETED and not txn.is_reconciled
            ),
            key=lambda txn: txn.updated_at,
        )
        total_amount = sum((t.total_amount.amount for t in pending), Decimal("0"))
        total_paid = sum((t.paid_amount.amount for t in pending), Decimal("0"))

        return UnreconciledSummaryDTO(
            total_unreconciled=len(pending),
            total_amount=str(Money(total_amount)),
            total_paid=str(Money(total_paid)),
            transactions=[transaction_to_dto(t) for t in pending],
        )
