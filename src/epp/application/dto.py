"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItemSpec:
    """Input: what the employee asked for.

    Prices and discounts arrive as text (e.g. "15.00") and are parsed
    into Money by the handler. A missing price means "look it up".
    """

    product_ref: str
    quantity: int
    unit_price: str | None = None
    discount: str | None = None


@dataclass(frozen=True)
class SettledLineItemDTO:
    product_ref: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    discount: str
    subtotal: str


@dataclass(frozen=True)
class OrderTotalsDTO:
    items: list[SettledLineItemDTO]
    subtotal: str
    discount: str
    tax: str
    total: str


@dataclass(frozen=True)
class PaymentDTO:
    installment_id: str
    amount: str
    paid_at: str
    payroll_batch_id: str | None = None
    payroll_reference: str | None = None
    processed_by: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class TransactionSummaryDTO:
    transaction_number: str
    order_id: str
    type: str
    status: str
    payment_method: str
    total_amount: str
    paid_amount: str
    balance: str
    payment_count: int
    last_payment: PaymentDTO | None
    payment_history: list[PaymentDTO]
    is_reconciled: bool


@dataclass(frozen=True)
class SettlementDTO:
    """Output of settling an order: the totals plus the opened ledger."""

    totals: OrderTotalsDTO
    transaction: TransactionSummaryDTO


@dataclass(frozen=True)
class UnreconciledSummaryDTO:
    total_unreconciled: int
    total_amount: str
    total_paid: str
    transactions: list[TransactionSummaryDTO]
