from pathlib import Path

import click

from epp.infrastructure.bootstrap import DEFAULT_DATA_DIR
from epp.infrastructure.cli.order_commands import order_quote, order_settle
from epp.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update_price,
)
from epp.infrastructure.cli.transaction_commands import (
    transaction_pay,
    transaction_reconcile,
    transaction_show,
    transaction_unreconciled,
)
from epp.infrastructure.log_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="EPP_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    envvar="EPP_LOG_LEVEL",
    show_default=True,
)
@click.option("--log-json", is_flag=True, envvar="EPP_LOG_JSON", help="Emit JSON log lines.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str, log_json: bool) -> None:
    """EPP: Employee Purchase Program settlement"""
    configure_logging(level=log_level, json_output=log_json)
    ctx.obj = data_dir


@cli.group()
def order() -> None:
    """Price and settle orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def transaction() -> None:
    """Manage payment ledgers."""


# Register subcommands
order.add_command(order_quote)
order.add_command(order_settle)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update_price)
transaction.add_command(transaction_pay)
transaction.add_command(transaction_reconcile)
transaction.add_command(transaction_show)
transaction.add_command(transaction_unreconciled)
