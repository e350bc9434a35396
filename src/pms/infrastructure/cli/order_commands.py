"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from pms.application.create_offer_order import CreateOfferOrderHandler
from pms.application.create_order import CreateOrderHandler
from pms.application.dto import OrderDTO, ProductSelection, ShipmentOutcome
from pms.application.list_orders import ListOrdersHandler
from pms.application.ship_order import ShipOrderHandler
from pms.application.show_order import ShowOrderHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import (
    offer_repository,
    order_repository,
    product_repository,
)
from pms.infrastructure.config import Settings


def _parse_items(raw: str) -> list[ProductSelection]:
    """Parse '1:3:gift wrap,2:5' into ProductSelection list."""
    selections: list[ProductSelection] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if ":" not in entry:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductID:Quantity[:Details]'."
            )
        product_id, qty_str, *rest = entry.split(":", 2)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product #{product_id}."
            )
        details = rest[0].strip() if rest else ""
        selections.append(
            ProductSelection(product_id=product_id.strip(), quantity=qty, details=details)
        )
    return selections


def _parse_quantities(raw: str) -> dict[str, int | None]:
    """Parse '1:2,4:1' into {product_id: qty} dict."""
    result: dict[str, int | None] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if ":" not in entry:
            raise click.BadParameter(
                f"Invalid quantity format '{entry}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = entry.rsplit(":", 1)
        try:
            result[product_id.strip()] = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product #{product_id}."
            )
    return result


def _prompt_items(settings: Settings) -> list[ProductSelection]:
    """Interactively pick products, then a quantity and note for each."""
    products = product_repository(settings).list_all()
    if not products:
        raise click.ClickException("No products found.")

    click.echo("Available products:")
    for p in products:
        click.echo(f"  #{p.id:<5} {p.name:<20} stock: {p.stock}")

    raw_ids = click.prompt("Product IDs for the order (comma separated)")
    selections: list[ProductSelection] = []
    for product_id in (pid.strip() for pid in raw_ids.split(",")):
        if not product_id:
            continue
        qty = click.prompt(f"Quantity for #{product_id}", type=int)
        details = click.prompt(f"Details for #{product_id}", default="", show_default=False)
        selections.append(ProductSelection(product_id, qty, details))
    return selections


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.offer_id:
        click.echo(f"Offer:    #{dto.offer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>12}  Details")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} "
            f"{item.line_total:>12}  {item.details}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Order Total':<27} {dto.total_cost:>22}")
    click.echo(f"  {'Net Cost':<27} {dto.total_net_cost:>22}")


@click.command("create")
@click.option("--items", default=None, help="Items as 'ID:Qty[:Details],ID:Qty'. Prompts when omitted.")
@click.pass_obj
def order_create(settings: Settings, items: str | None) -> None:
    """Create an order for hand-picked products."""
    try:
        specs = _parse_items(items) if items else _prompt_items(settings)
        handler = CreateOrderHandler(
            order_repo=order_repository(settings),
            product_repo=product_repository(settings),
        )
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("create-from-offer")
@click.option("--offer", "offer_id", required=True, help="Offer ID.")
@click.option("--quantities", default=None, help="Per-product quantities as 'ID:Qty,ID:Qty' (default 1 each).")
@click.pass_obj
def order_create_from_offer(settings: Settings, offer_id: str, quantities: str | None) -> None:
    """Create an order for every product in an offer."""
    parsed = _parse_quantities(quantities) if quantities else None

    try:
        handler = CreateOfferOrderHandler(
            order_repo=order_repository(settings),
            offer_repo=offer_repository(settings),
            product_repo=product_repository(settings),
        )
        dto = handler.handle(offer_id, parsed)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created from offer #{offer_id}")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        handler = ShowOrderHandler(order_repo=order_repository(settings))
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice(["Pending", "Shipped"], case_sensitive=False),
    default=None,
    help="Only show orders in this status.",
)
@click.pass_obj
def order_list(settings: Settings, status: str | None) -> None:
    """List all sales orders and their total value."""
    try:
        handler = ListOrdersHandler(order_repo=order_repository(settings))
        result = handler.handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Date':<20} {'Status':<10} {'Lines':>5} {'Total':>12}")
    click.echo("-" * 57)
    for dto in result.orders:
        click.echo(
            f"{dto.id:<6} {dto.created_at:<20} {dto.status:<10} "
            f"{len(dto.items):>5} {dto.total_cost:>12}"
        )
    click.echo("-" * 57)
    click.echo(f"All sales orders total value: {result.total_value}")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
@click.option("--yes", is_flag=True, default=False, help="Ship without asking for confirmation.")
@click.pass_obj
def order_ship(settings: Settings, order_id: int, yes: bool) -> None:
    """Ship a pending order (deducts product stock)."""
    if not yes and not click.confirm(f"Do you wish to ship order #{order_id}?"):
        click.echo("Shipment cancelled.")
        return

    try:
        handler = ShipOrderHandler(
            order_repo=order_repository(settings),
            product_repo=product_repository(settings),
        )
        result = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.outcome is ShipmentOutcome.ALREADY_SHIPPED:
        click.echo(f"Order #{order_id} is already shipped.")
        return

    click.echo(f"Order #{order_id} has been shipped.")
    for change in result.stock_changes:
        click.echo(
            f"  {change.product_name:<20} stock {change.previous_stock} -> {change.new_stock}"
        )
    for product_id in result.skipped_product_ids:
        click.echo(f"  product #{product_id} no longer exists, stock not updated")
