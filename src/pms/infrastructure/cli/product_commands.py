"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pms.application.add_product import AddProductHandler
from pms.application.list_products import ListProductsHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import (
    category_repository,
    product_repository,
    supplier_repository,
)
from pms.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--supplier", "supplier_id", default=None, help="Supplier ID (optional).")
@click.option("--price", required=True, help="Unit sale price (e.g. 15.00).")
@click.option("--cost", required=True, help="Unit acquisition cost (e.g. 9.50).")
@click.option("--stock", required=True, type=int, help="Units on hand.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    category_id: str,
    supplier_id: str | None,
    price: str,
    cost: str,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(
            product_repo=product_repository(settings),
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
        )
        product = handler.handle(
            name=name,
            category_id=category_id,
            price=price,
            cost=cost,
            stock=stock,
            supplier_id=supplier_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"(cost {product.cost}, stock {product.stock})"
    )


@click.command("list")
@click.option("--category", "category_id", default=None, help="Only products in this category.")
@click.option("--supplier", "supplier_id", default=None, help="Only products from this supplier.")
@click.pass_obj
def product_list(settings: Settings, category_id: str | None, supplier_id: str | None) -> None:
    """List products in the catalog."""
    try:
        handler = ListProductsHandler(
            product_repo=product_repository(settings),
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
        )
        products = handler.handle(category_id=category_id, supplier_id=supplier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Category':<22} {'Supplier':<28} "
        f"{'Price':>10} {'Cost':>10} {'Stock':>6}"
    )
    click.echo("-" * 108)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category_name or 'N/A':<22} "
            f"{p.supplier_name or 'N/A':<28} {p.price:>10} {p.cost:>10} {p.stock:>6}"
        )
