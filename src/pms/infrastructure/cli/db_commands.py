"""CLI commands for managing the data store."""

from __future__ import annotations

import click

from pms.application.seed_catalog import SeedCatalogHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import (
    category_repository,
    offer_repository,
    order_repository,
    product_repository,
    supplier_repository,
)
from pms.infrastructure.config import Settings


@click.command("seed")
@click.option("--force", is_flag=True, default=False, help="Seed even if the catalog is not empty.")
@click.pass_obj
def db_seed(settings: Settings, force: bool) -> None:
    """Load a sample catalog, offers and one order."""
    try:
        handler = SeedCatalogHandler(
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
            product_repo=product_repository(settings),
            offer_repo=offer_repository(settings),
            order_repo=order_repository(settings),
        )
        summary = handler.handle(force=force)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Seeded {summary.categories} categories, {summary.suppliers} suppliers, "
        f"{summary.products} products, {summary.offers} offers and {summary.orders} order "
        f"into {settings.data_dir}"
    )
