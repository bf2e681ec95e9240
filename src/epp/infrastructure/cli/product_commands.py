"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from epp.application.add_product import AddProductHandler
from epp.application.update_product_prices import UpdateProductPricesHandler
from epp.domain.exceptions import DomainException
from epp.infrastructure.bootstrap import product_repository


def _fmt(price) -> str:
    return str(price) if price is not None else "-"


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--employee-price", default=None, help="Employee price (e.g. 12.00).")
@click.option("--retail-price", default=None, help="Retail price (e.g. 15.00).")
@click.pass_obj
def product_add(
    data_dir: Path, name: str, employee_price: str | None, retail_price: str | None
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(
            name=name, employee_price=employee_price, retail_price=retail_price
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"(employee {_fmt(product.employee_price)}, retail {_fmt(product.retail_price)})"
    )


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path) -> None:
    """List all products in the catalog."""
    products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Employee':>10} {'Retail':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {_fmt(p.employee_price):>10} {_fmt(p.retail_price):>10}"
        )


@click.command("update-price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--employee-price", default=None, help="New employee price.")
@click.option("--retail-price", default=None, help="New retail price.")
@click.pass_obj
def product_update_price(
    data_dir: Path,
    product_id: str,
    employee_price: str | None,
    retail_price: str | None,
) -> None:
    """Update a product's employee and/or retail price."""
    handler = UpdateProductPricesHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(
            product_id=product_id,
            employee_price=employee_price,
            retail_price=retail_price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} prices updated "
        f"(employee {_fmt(product.employee_price)}, retail {_fmt(product.retail_price)})"
    )
