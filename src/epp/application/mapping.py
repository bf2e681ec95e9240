"""Domain -> DTO mapping shared by the use-case handlers."""

from __future__ import annotations

from decimal import Decimal

from epp.application.dto import (
    LineItemSpec,
    OrderTotalsDTO,
    PaymentDTO,
    SettledLineItemDTO,
    TransactionSummaryDTO,
)
from epp.domain.model.settlement import LineItemRequest, OrderTotals
from epp.domain.model.transaction import PaymentRecord, Transaction
from epp.domain.model.value_objects import Money, Quantity


def to_line_item_request(spec: LineItemSpec) -> LineItemRequest:
    return LineItemRequest(
        product_ref=spec.product_ref,
        quantity=Quantity(spec.quantity),
        unit_price=Money.of(spec.unit_price) if spec.unit_price else None,
        discount=Money.of(spec.discount) if spec.discount else None,
    )


def totals_to_dto(totals: OrderTotals) -> OrderTotalsDTO:
    return OrderTotalsDTO(
        items=[
            SettledLineItemDTO(
                product_ref=item.product_ref,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                discount=str(item.discount),
                subtotal=str(item.subtotal),
            )
            for item in totals.items
        ],
        subtotal=str(totals.subtotal),
        discount=str(totals.discount),
        tax=str(totals.tax),
        total=str(totals.total),
    )


def payment_to_dto(payment: PaymentRecord) -> PaymentDTO:
    return PaymentDTO(
        installment_id=payment.installment_id,
        amount=str(payment.amount),
        paid_at=payment.paid_at.strftime("%Y-%m-%d %H:%M UTC"),
        payroll_batch_id=payment.payroll_batch_id,
        payroll_reference=payment.payroll_reference,
        processed_by=payment.processed_by,
        notes=payment.notes,
    )


def transaction_to_dto(txn: Transaction) -> TransactionSummaryDTO:
    history = [payment_to_dto(p) for p in txn.payment_history]
    return TransactionSummaryDTO(
        transaction_number=txn.transaction_number,
        order_id=txn.order_id,
        type=txn.type.value,
        status=txn.status.value,
        payment_method=txn.payment_method.value,
        total_amount=str(txn.total_amount),
        paid_amount=str(txn.paid_amount),
        balance=format_signed(txn.balance),
        payment_count=len(history),
        last_payment=history[-1] if history else None,
        payment_history=history,
        is_reconciled=txn.is_reconciled,
    )


def format_signed(amount: Decimal) -> str:
    """Like ``str(Money)`` but tolerates negative amounts (overpayments)."""
    if amount < 0:
        return f"-${-amount:.2f}"
    return f"${amount:.2f}"
