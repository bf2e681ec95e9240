"""JSON-file-backed implementation of TransactionRepository."""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from epp.domain.model.transaction import (
    PaymentMethod,
    PaymentRecord,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from epp.domain.model.value_objects import Money
from epp.domain.repository.transaction_repository import TransactionRepository


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- TransactionRepository interface --------------------------------------

    def get_by_order_id(self, order_id: str) -> Transaction | None:
        for raw in self._load_raw():
            if raw["order_id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Transaction]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, transaction: Transaction) -> None:
        ledgers = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(ledgers):
            if raw["order_id"] == transaction.order_id:
                ledgers[i] = self._to_raw(transaction)
                replaced = True
                break
        if not replaced:
            ledgers.append(self._to_raw(transaction))

        self._persist_raw(ledgers)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(txn: Transaction) -> dict:
        return {
            "transaction_number": txn.transaction_number,
            "order_id": txn.order_id,
            "employee_id": txn.employee_id,
            "type": txn.type.value,
            "status": txn.status.value,
            "payment_method": txn.payment_method.value,
            "total_amount": str(txn.total_amount.amount),
            "paid_amount": str(txn.paid_amount.amount),
            "currency": txn.total_amount.currency,
            "payment_history": [
                {
                    "installment_id": p.installment_id,
                    "amount": str(p.amount.amount),
                    "paid_at": p.paid_at.isoformat(),
                    "payroll_batch_id": p.payroll_batch_id,
                    "payroll_reference": p.payroll_reference,
                    "payroll_date": _iso(p.payroll_date),
                    "processed_by": p.processed_by,
                    "notes": p.notes,
                }
                for p in txn.payment_history
            ],
            "is_reconciled": txn.is_reconciled,
            "reconciled_at": _iso(txn.reconciled_at),
            "reconciled_by": txn.reconciled_by,
            "notes": txn.notes,
            "created_at": txn.created_at.isoformat(),
            "updated_at": txn.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Transaction:
        currency = raw.get("currency", "USD")
        history = [
            PaymentRecord(
                installment_id=p["installment_id"],
                amount=Money(Decimal(p["amount"]), currency),
                paid_at=datetime.fromisoformat(p["paid_at"]),
                payroll_batch_id=p.get("payroll_batch_id"),
                payroll_reference=p.get("payroll_reference"),
                payroll_date=(
                    date.fromisoformat(p["payroll_date"])
                    if p.get("payroll_date")
                    else None
                ),
                processed_by=p.get("processed_by"),
                notes=p.get("notes"),
            )
            for p in raw.get("payment_history", [])
        ]
        return Transaction(
            transaction_number=raw["transaction_number"],
            order_id=raw["order_id"],
            employee_id=raw["employee_id"],
            type=TransactionType(raw["type"]),
            payment_method=PaymentMethod(raw["payment_method"]),
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            paid_amount=Money(Decimal(raw["paid_amount"]), currency),
            status=TransactionStatus(raw["status"]),
            payment_history=history,
            is_reconciled=raw.get("is_reconciled", False),
            reconciled_at=(
                datetime.fromisoformat(raw["reconciled_at"])
                if raw.get("reconciled_at")
                else None
            ),
            reconciled_by=raw.get("reconciled_by"),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, ledgers: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(ledgers, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
