"""CLI commands for categories and suppliers."""

from __future__ import annotations

import click

from pms.application.add_category import AddCategoryHandler
from pms.application.add_supplier import AddSupplierHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import category_repository, supplier_repository
from pms.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Optional description.")
@click.pass_obj
def category_add(settings: Settings, name: str, description: str | None) -> None:
    """Add a new category."""
    try:
        handler = AddCategoryHandler(category_repo=category_repository(settings))
        category = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List all categories."""
    try:
        categories = category_repository(settings).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} Description")
    click.echo("-" * 60)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<24} {c.description or ''}")


@click.command("add")
@click.option("--name", required=True, help="Supplier name.")
@click.option("--contact", default="", help="Who to reach, e.g. 'Jane (jane@example.com)'.")
@click.option("--description", default=None, help="Optional description.")
@click.pass_obj
def supplier_add(settings: Settings, name: str, contact: str, description: str | None) -> None:
    """Add a new supplier."""
    try:
        handler = AddSupplierHandler(supplier_repo=supplier_repository(settings))
        supplier = handler.handle(name=name, contact=contact, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier #{supplier.id} '{supplier.name}' added")


@click.command("list")
@click.pass_obj
def supplier_list(settings: Settings) -> None:
    """List all suppliers."""
    try:
        suppliers = supplier_repository(settings).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} Contact")
    click.echo("-" * 70)
    for s in suppliers:
        click.echo(f"{s.id:<6} {s.name:<30} {s.contact}")
