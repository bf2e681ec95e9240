"""CLI commands for the Transaction ledger."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from epp.application.dto import TransactionSummaryDTO
from epp.application.list_unreconciled import ListUnreconciledHandler
from epp.application.reconcile_transaction import ReconcileTransactionHandler
from epp.application.record_payment import RecordPaymentHandler
from epp.application.show_transaction import ShowTransactionHandler
from epp.domain.exceptions import DomainException
from epp.infrastructure.bootstrap import transaction_repository


def _display_transaction(dto: TransactionSummaryDTO) -> None:
    click.echo(f"{dto.transaction_number}  order={dto.order_id}  ({dto.type}, status={dto.status})")
    click.echo(f"Method:     {dto.payment_method}")
    click.echo(f"Total:      {dto.total_amount}")
    click.echo(f"Paid:       {dto.paid_amount}")
    click.echo(f"Balance:    {dto.balance}")
    click.echo(f"Reconciled: {'yes' if dto.is_reconciled else 'no'}")

    if dto.payment_history:
        click.echo()
        click.echo(f"  {'Installment':<14} {'Amount':>10}  {'Paid at':<20}")
        click.echo(f"  {'-'*46}")
        for p in dto.payment_history:
            click.echo(f"  {p.installment_id:<14} {p.amount:>10}  {p.paid_at:<20}")


@click.command("show")
@click.option("--order-id", required=True, help="Order reference.")
@click.pass_obj
def transaction_show(data_dir: Path, order_id: str) -> None:
    """Show the payment ledger of an order."""
    dto = ShowTransactionHandler(transaction_repository(data_dir)).handle(order_id)
    if dto is None:
        click.echo(f"No transaction for order {order_id}.")
        return
    _display_transaction(dto)


@click.command("pay")
@click.option("--order-id", required=True, help="Order reference.")
@click.option("--installment-id", required=True, help="Installment being paid.")
@click.option("--amount", required=True, help="Amount paid (e.g. 50.00).")
@click.option("--batch-id", default=None, help="Payroll batch ID.")
@click.option("--reference", default=None, help="Payroll reference.")
@click.option("--payroll-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--processed-by", default=None)
@click.option("--notes", default=None)
@click.pass_obj
def transaction_pay(
    data_dir: Path,
    order_id: str,
    installment_id: str,
    amount: str,
    batch_id: str | None,
    reference: str | None,
    payroll_date: datetime | None,
    processed_by: str | None,
    notes: str | None,
) -> None:
    """Record a payment against an order's ledger."""
    handler = RecordPaymentHandler(transaction_repository(data_dir))

    try:
        dto = handler.handle(
            order_id=order_id,
            installment_id=installment_id,
            amount=amount,
            payroll_batch_id=batch_id,
            payroll_reference=reference,
            payroll_date=payroll_date.date() if payroll_date else None,
            processed_by=processed_by,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Payment recorded for order {order_id}: paid {dto.paid_amount} "
        f"of {dto.total_amount}, balance {dto.balance} (status={dto.status})"
    )


@click.command("reconcile")
@click.option("--order-id", required=True, help="Order reference.")
@click.option("--by", "reconciled_by", required=True, help="Who reconciled the ledger.")
@click.option("--notes", default=None)
@click.pass_obj
def transaction_reconcile(
    data_dir: Path, order_id: str, reconciled_by: str, notes: str | None
) -> None:
    """Mark an order's ledger as reconciled."""
    handler = ReconcileTransactionHandler(transaction_repository(data_dir))

    try:
        handler.handle(order_id=order_id, reconciled_by=reconciled_by, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Transaction for order {order_id} reconciled by {reconciled_by}.")


@click.command("unreconciled")
@click.pass_obj
def transaction_unreconciled(data_dir: Path) -> None:
    """List completed ledgers awaiting reconciliation."""
    dto = ListUnreconciledHandler(transaction_repository(data_dir)).handle()

    if not dto.transactions:
        click.echo("No unreconciled transactions.")
        return

    click.echo(f"{'Transaction':<18} {'Order':<12} {'Total':>10} {'Paid':>10}")
    click.echo("-" * 53)
    for t in dto.transactions:
        click.echo(f"{t.transaction_number:<18} {t.order_id:<12} {t.total_amount:>10} {t.paid_amount:>10}")
    click.echo("-" * 53)
    click.echo(f"{dto.total_unreconciled} unreconciled, total {dto.total_amount}, paid {dto.total_paid}")
