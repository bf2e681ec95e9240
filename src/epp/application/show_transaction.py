"""Application service: Show Transaction use case (query)."""

from __future__ import annotations

from epp.application.dto import TransactionSummaryDTO
from epp.application.mapping import transaction_to_dto
from epp.domain.repository.transaction_repository import TransactionRepository


class ShowTransactionHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, order_id: str) -> TransactionSummaryDTO | None:
        """Return the ledger summary, or None when the order has none yet."""
        txn = self._transaction_repo.get_by_order_id(order_id)
        if txn is None:
            return None
        return transaction_to_dto(txn)
