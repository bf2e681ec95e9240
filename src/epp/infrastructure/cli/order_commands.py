"""CLI commands for pricing and settling orders."""

from __future__ import annotations

from pathlib import Path

import click

from epp.application.dto import LineItemSpec, OrderTotalsDTO
from epp.application.quote_order import QuoteOrderHandler
from epp.application.settle_order import SettleOrderHandler
from epp.domain.exceptions import DomainException
from epp.domain.model.transaction import PaymentMethod, PaymentType
from epp.domain.model.value_objects import TaxRate
from epp.infrastructure.bootstrap import product_repository, transaction_repository

tax_rate_option = click.option(
    "--tax-rate",
    default="0.10",
    envvar="EPP_TAX_RATE",
    show_default=True,
    help="Tax rate as a fraction (0.10 = 10%).",
)


def _parse_items(raw: str) -> list[LineItemSpec]:
    """Parse 'SKU:Qty[:Price[:Discount]],...' into LineItemSpec list.

    Leave Price empty to look it up, e.g. '2:1::5.00'.
    """
    specs: list[LineItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if not 2 <= len(parts) <= 4:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. "
                f"Expected 'ProductId:Quantity[:Price[:Discount]]'."
            )
        ref, qty_str, *rest = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{ref}'."
            )
        price = rest[0] if len(rest) > 0 and rest[0] else None
        discount = rest[1] if len(rest) > 1 and rest[1] else None
        specs.append(
            LineItemSpec(product_ref=ref, quantity=qty, unit_price=price, discount=discount)
        )
    return specs


def _display_totals(dto: OrderTotalsDTO) -> None:
    """Shared formatting for displaying order totals."""
    click.echo(
        f"  {'Product':<12} {'Qty':>5} {'Price':>10} {'Discount':>10} {'Subtotal':>10}"
    )
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_ref:<12} {item.quantity:>5} {item.unit_price:>10} "
            f"{item.discount:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<20} {dto.subtotal:>31}")
    click.echo(f"  {'Discount':<20} {dto.discount:>31}")
    click.echo(f"  {'Tax':<20} {dto.tax:>31}")
    click.echo(f"  {'Order Total':<20} {dto.total:>31}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'Id:Qty[:Price[:Discount]],...'.")
@tax_rate_option
@click.pass_obj
def order_quote(data_dir: Path, items: str, tax_rate: str) -> None:
    """Price a basket without opening a ledger."""
    specs = _parse_items(items)

    handler = QuoteOrderHandler(price_lookup=product_repository(data_dir))

    try:
        dto = handler.handle(specs, tax_rate=TaxRate.of(tax_rate))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_totals(dto)


@click.command("settle")
@click.option("--order-id", required=True, help="Order reference.")
@click.option("--employee-id", required=True, help="Purchasing employee.")
@click.option("--items", required=True, help="Items as 'Id:Qty[:Price[:Discount]],...'.")
@click.option("--installment", is_flag=True, default=False, help="Pay in installments.")
@click.option(
    "--method",
    type=click.Choice([m.value for m in PaymentMethod], case_sensitive=False),
    default=PaymentMethod.PAYROLL_DEDUCTION.value,
    show_default=True,
    help="Payment method.",
)
@tax_rate_option
@click.pass_obj
def order_settle(
    data_dir: Path,
    order_id: str,
    employee_id: str,
    items: str,
    installment: bool,
    method: str,
    tax_rate: str,
) -> None:
    """Compute order totals and open the payment ledger."""
    specs = _parse_items(items)

    handler = SettleOrderHandler(
        price_lookup=product_repository(data_dir),
        transaction_repo=transaction_repository(data_dir),
    )

    try:
        dto = handler.handle(
            order_id=order_id,
            employee_id=employee_id,
            item_specs=specs,
            payment_type=PaymentType.INSTALLMENT if installment else PaymentType.FULL,
            payment_method=PaymentMethod(method.upper()),
            tax_rate=TaxRate.of(tax_rate),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    txn = dto.transaction
    click.echo(f"Order {order_id} settled: {txn.transaction_number} ({txn.type}, status={txn.status})")
    click.echo()
    _display_totals(dto.totals)
