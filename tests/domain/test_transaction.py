"""Unit tests for the Transaction ledger aggregate."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from epp.domain.exceptions import ValidationError
from epp.domain.model.transaction import (
    PaymentMethod,
    PaymentRecord,
    PaymentType,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from epp.domain.model.value_objects import Money

OPENED_AT = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def _open(
    total: str = "220.00",
    payment_type: PaymentType = PaymentType.INSTALLMENT,
) -> Transaction:
    return Transaction.open(
        order_id="ORD-1",
        employee_id="EMP-7",
        total_amount=Money.of(total),
        payment_type=payment_type,
        payment_method=PaymentMethod.PAYROLL_DEDUCTION,
        now=OPENED_AT,
    )


def _payment(amount: str, installment: str = "I-1") -> PaymentRecord:
    return PaymentRecord(installment_id=installment, amount=Money.of(amount))


class TestOpen:

    def test_new_ledger_is_pending_with_full_balance(self):
        txn = _open()
        assert txn.status == TransactionStatus.PENDING
        assert txn.paid_amount.is_zero
        assert txn.balance == Decimal("220.00")
        assert txn.payment_history == []
        assert not txn.is_reconciled

    def test_transaction_number_from_timestamp(self):
        txn = _open()
        assert txn.transaction_number == f"TXN-{int(OPENED_AT.timestamp() * 1000)}"

    def test_installment_type(self):
        assert _open(payment_type=PaymentType.INSTALLMENT).type == TransactionType.INSTALLMENT

    def test_full_payment_is_purchase(self):
        assert _open(payment_type=PaymentType.FULL).type == TransactionType.PURCHASE

    def test_employee_required(self):
        with pytest.raises(ValidationError, match="Employee ID is required"):
            Transaction.open(
                order_id="ORD-1",
                employee_id="",
                total_amount=Money.of("10"),
                payment_type=PaymentType.FULL,
                payment_method=PaymentMethod.CASH,
            )


class TestRecordPayment:

    def test_partial_payment_moves_to_processing(self):
        txn = _open()
        txn.record_payment(_payment("100"))
        assert txn.status == TransactionStatus.PROCESSING
        assert txn.paid_amount == Money.of("100")
        assert txn.balance == Decimal("120.00")
        assert txn.last_payment.installment_id == "I-1"

    def test_final_payment_completes(self):
        txn = _open()
        txn.record_payment(_payment("100", "I-1"))
        txn.record_payment(_payment("120", "I-2"))
        assert txn.status == TransactionStatus.COMPLETED
        assert txn.balance == Decimal("0")
        assert len(txn.payment_history) == 2

    def test_overpayment_completes_with_negative_balance(self):
        txn = _open(total="50")
        txn.record_payment(_payment("60"))
        assert txn.status == TransactionStatus.COMPLETED
        assert txn.balance == Decimal("-10")

    def test_zero_payment_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _open().record_payment(_payment("0"))

    def test_updated_at_follows_payment(self):
        txn = _open()
        payment = _payment("10")
        txn.record_payment(payment)
        assert txn.updated_at == payment.paid_at


class TestReconcile:

    def test_reconcile(self):
        txn = _open()
        txn.reconcile("finance@corp", notes="checked", now=OPENED_AT)
        assert txn.is_reconciled
        assert txn.reconciled_by == "finance@corp"
        assert txn.reconciled_at == OPENED_AT
        assert txn.notes == "checked"

    def test_reconcile_keeps_existing_notes(self):
        txn = _open()
        txn.notes = "paid at counter"
        txn.reconcile("finance@corp")
        assert txn.notes == "paid at counter"

    def test_double_reconcile_rejected(self):
        txn = _open()
        txn.reconcile("finance@corp")
        with pytest.raises(ValidationError, match="already reconciled"):
            txn.reconcile("finance@corp")
