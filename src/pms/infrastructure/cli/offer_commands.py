"""CLI commands for the Offer aggregate and offer reports."""

from __future__ import annotations

import click

from pms.application.create_offer import CreateOfferHandler
from pms.application.dto import OfferDTO
from pms.application.find_offers import FindOffersHandler
from pms.application.offer_stock_report import OfferStockReportHandler
from pms.application.offers_by_product import OffersByProductHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import (
    category_repository,
    offer_repository,
    product_repository,
    supplier_repository,
)
from pms.infrastructure.config import Settings


def _display_offers(offers: list[OfferDTO]) -> None:
    for offer in offers:
        status = "" if offer.active else "  (inactive)"
        click.echo(f"#{offer.id} {offer.label}  price: {offer.price}{status}")
        for p in offer.products:
            click.echo(
                f"  - {p.name:<20} {p.price:>10}  "
                f"category: {p.category_name or 'N/A'}  supplier: {p.supplier_name or 'N/A'}"
            )
        click.echo("-" * 40)


@click.command("create")
@click.option("--products", "product_ids", required=True, help="Product IDs as '1,2,3'.")
@click.option("--price", required=True, help="Bundle price (e.g. 1800).")
@click.option("--name", default=None, help="Optional label for the offer.")
@click.option("--inactive", is_flag=True, default=False, help="Create the offer as inactive.")
@click.pass_obj
def offer_create(
    settings: Settings,
    product_ids: str,
    price: str,
    name: str | None,
    inactive: bool,
) -> None:
    """Bundle existing products into a fixed-price offer."""
    ids = [pid.strip() for pid in product_ids.split(",") if pid.strip()]

    try:
        handler = CreateOfferHandler(
            offer_repo=offer_repository(settings),
            product_repo=product_repository(settings),
        )
        offer = handler.handle(product_ids=ids, price=price, name=name, active=not inactive)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Offer #{offer.id} created with {len(offer.product_ids)} product(s) at {offer.price}"
    )


@click.command("list")
@click.option("--min-price", default=None, help="Lowest bundle price (inclusive).")
@click.option("--max-price", default=None, help="Highest bundle price (inclusive).")
@click.option("--category", "category_id", default=None, help="Only offers with a product in this category.")
@click.pass_obj
def offer_list(
    settings: Settings,
    min_price: str | None,
    max_price: str | None,
    category_id: str | None,
) -> None:
    """List offers, by price range or by category."""
    if (min_price is None) != (max_price is None):
        raise click.UsageError("--min-price and --max-price must be given together")
    if category_id and min_price is not None:
        raise click.UsageError("Filter by price range or by category, not both")

    try:
        handler = FindOffersHandler(
            offer_repo=offer_repository(settings),
            product_repo=product_repository(settings),
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
        )
        if category_id:
            offers = handler.in_category(category_id)
        elif min_price is not None:
            offers = handler.in_price_range(min_price, max_price)
        else:
            offers = handler.all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not offers:
        click.echo("No offers found.")
        return
    _display_offers(offers)


@click.command("availability")
@click.pass_obj
def offer_availability(settings: Settings) -> None:
    """Count offers by how many of their products are in stock."""
    try:
        handler = OfferStockReportHandler(
            offer_repo=offer_repository(settings),
            product_repo=product_repository(settings),
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
        )
        report = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for row in report.offers:
        click.echo(
            f"#{row.offer_id:<5} {row.label:<24} "
            f"{row.in_stock_count}/{row.product_count} in stock  ({row.availability})"
        )
    click.echo("-" * 54)
    click.echo(f"Offers with all products in stock:  {report.all_in_stock}")
    click.echo(f"Offers with some products in stock: {report.some_in_stock}")
    click.echo(f"Offers with no products in stock:   {report.none_in_stock}")


@click.command("by-product")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def offer_by_product(settings: Settings, product_id: str) -> None:
    """Show every offer containing a product, with cost and price."""
    try:
        handler = OffersByProductHandler(
            offer_repo=offer_repository(settings),
            product_repo=product_repository(settings),
            category_repo=category_repository(settings),
            supplier_repo=supplier_repository(settings),
        )
        offers = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not offers:
        click.echo(f"Product #{product_id} is not in any offer.")
        return

    for offer in offers:
        click.echo(f"#{offer.offer_id} {offer.label} includes:")
        for p in offer.products:
            click.echo(f"  - {p.name:<20} cost: {p.cost:>10}  sales price: {p.price:>10}")
        click.echo(f"  Total net cost: {offer.total_net_cost}")
        click.echo(f"  Offer price:    {offer.price}")
        click.echo("-" * 40)
