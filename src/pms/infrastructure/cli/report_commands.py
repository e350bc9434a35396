"""CLI commands for sales reports."""

from __future__ import annotations

import click

from pms.application.profit_report import ProfitReportHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import order_repository
from pms.infrastructure.config import Settings


@click.command("profit")
@click.pass_obj
def report_profit(settings: Settings) -> None:
    """Sum order value, cost and profit across all orders."""
    try:
        handler = ProfitReportHandler(order_repo=order_repository(settings))
        report = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders counted:                {report.order_count}")
    click.echo(f"All sales orders cost value:   ${report.total_net_value:.2f}")
    click.echo(f"All sales orders total value:  ${report.total_value:.2f}")
    click.echo("-" * 44)
    click.echo(f"Total profit margin:           ${report.profit_margin:.2f}")
