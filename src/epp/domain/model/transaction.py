"""Transaction aggregate: the payment ledger kept for a settled order.

A ledger starts PENDING with the full order total outstanding. Each
recorded payment reduces the balance; once nothing is left to pay the
ledger is COMPLETED. Completed ledgers are later reconciled by finance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from epp.domain.exceptions import ValidationError
from epp.domain.model.value_objects import Money


class TransactionType(Enum):
    PURCHASE = "PURCHASE"
    INSTALLMENT = "INSTALLMENT"
    POINTS_REDEMPTION = "POINTS_REDEMPTION"
    REFUND = "REFUND"
    ADJUSTMENT = "ADJUSTMENT"


class TransactionStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    REVERSED = "REVERSED"


class PaymentMethod(Enum):
    PAYROLL_DEDUCTION = "PAYROLL_DEDUCTION"
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    BANK_TRANSFER = "BANK_TRANSFER"
    POINTS = "POINTS"
    MIXED = "MIXED"
    OTHER = "OTHER"


class PaymentType(Enum):
    """How the employee chose to pay for the order."""

    FULL = "FULL"
    INSTALLMENT = "INSTALLMENT"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PaymentRecord:
    installment_id: str
    amount: Money
    paid_at: datetime = field(default_factory=_now)
    payroll_batch_id: str | None = None
    payroll_reference: str | None = None
    payroll_date: date | None = None
    processed_by: str | None = None
    notes: str | None = None


@dataclass
class Transaction:
    """Aggregate root for an order's payment ledger.

    Use ``Transaction.open()`` for new ledgers. The plain constructor is
    for repositories reconstituting persisted ledgers.
    """

    transaction_number: str
    order_id: str
    employee_id: str
    type: TransactionType
    payment_method: PaymentMethod
    total_amount: Money
    paid_amount: Money = field(default_factory=Money.zero)
    status: TransactionStatus = TransactionStatus.PENDING
    payment_history: list[PaymentRecord] = field(default_factory=list)
    is_reconciled: bool = False
    reconciled_at: datetime | None = None
    reconciled_by: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW ledgers only) ----------------------------------

    @staticmethod
    def open(
        order_id: str,
        employee_id: str,
        total_amount: Money,
        payment_type: PaymentType,
        payment_method: PaymentMethod,
        now: datetime | None = None,
    ) -> Transaction:
        if not order_id:
            raise ValidationError("Order ID is required")
        if not employee_id:
            raise ValidationError("Employee ID is required")

        opened_at = now or _now()
        txn_type = (
            TransactionType.INSTALLMENT
            if payment_type is PaymentType.INSTALLMENT
            else TransactionType.PURCHASE
        )
        return Transaction(
            transaction_number=f"TXN-{int(opened_at.timestamp() * 1000)}",
            order_id=order_id,
            employee_id=employee_id,
            type=txn_type,
            payment_method=payment_method,
            total_amount=total_amount,
            created_at=opened_at,
            updated_at=opened_at,
        )

    # --- Behaviour ------------------------------------------------------------

    def record_payment(self, payment: PaymentRecord) -> None:
        """Apply a payment and move to PROCESSING or COMPLETED."""
        if payment.amount.is_zero:
            raise ValidationError("Payment amount must be greater than zero")

        self.payment_history.append(payment)
        self.paid_amount = self.paid_amount + payment.amount
        if self.balance <= 0:
            self.status = TransactionStatus.COMPLETED
        else:
            self.status = TransactionStatus.PROCESSING
        self.updated_at = payment.paid_at

    def reconcile(
        self,
        reconciled_by: str,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> None:
        if self.is_reconciled:
            raise ValidationError(
                f"Transaction already reconciled for order {self.order_id}"
            )
        if not reconciled_by:
            raise ValidationError("Reconciler is required")

        self.is_reconciled = True
        self.reconciled_at = now or _now()
        self.reconciled_by = reconciled_by
        self.notes = notes or self.notes
        self.updated_at = self.reconciled_at

    # --- Computed properties --------------------------------------------------

    @property
    def balance(self) -> Decimal:
        """Outstanding amount; negative when the order was overpaid."""
        return self.total_amount.amount - self.paid_amount.amount

    @property
    def last_payment(self) -> PaymentRecord | None:
        return self.payment_history[-1] if self.payment_history else None
