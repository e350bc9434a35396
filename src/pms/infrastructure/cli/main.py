import click

from pms.infrastructure.cli.catalog_commands import (
    category_add,
    category_list,
    supplier_add,
    supplier_list,
)
from pms.infrastructure.cli.db_commands import db_seed
from pms.infrastructure.cli.offer_commands import (
    offer_availability,
    offer_by_product,
    offer_create,
    offer_list,
)
from pms.infrastructure.cli.order_commands import (
    order_create,
    order_create_from_offer,
    order_list,
    order_ship,
    order_show,
)
from pms.infrastructure.cli.product_commands import product_add, product_list
from pms.infrastructure.cli.report_commands import report_profit
from pms.infrastructure.config import load_settings
from pms.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Directory holding the JSON collections.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log verbosity (default: $PMS_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, log_level: str | None) -> None:
    """PMS: Product Management System"""
    settings = load_settings(data_dir=data_dir, log_level=log_level)
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def offer() -> None:
    """Manage offers."""


@cli.group()
def order() -> None:
    """Manage sales orders."""


@cli.group()
def report() -> None:
    """Sales reports."""


@cli.group()
def db() -> None:
    """Manage the data store."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_list)
supplier.add_command(supplier_add)
supplier.add_command(supplier_list)
product.add_command(product_add)
product.add_command(product_list)
offer.add_command(offer_availability)
offer.add_command(offer_by_product)
offer.add_command(offer_create)
offer.add_command(offer_list)
order.add_command(order_create)
order.add_command(order_create_from_offer)
order.add_command(order_list)
order.add_command(order_ship)
order.add_command(order_show)
report.add_command(report_profit)
db.add_command(db_seed)
