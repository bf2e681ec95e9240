"""Abstract repository for Transaction aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from epp.domain.model.transaction import Transaction


class TransactionRepository(ABC):

    @abstractmethod
    def get_by_order_id(self, order_id: str) -> Transaction | None:
        """Return the ledger for an order, or None if none was opened."""

    @abstractmethod
    def list_all(self) -> list[Transaction]:
        """Return every ledger."""

    @abstractmethod
    def save(self, transaction: Transaction) -> None:
        """Persist a new or updated ledger (keyed by order ID)."""
