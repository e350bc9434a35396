"""Application service: Profit report (query).

Profit is booked when an order is created, not when it ships: every
order counts, whatever its status.
"""

from __future__ import annotations

from decimal import Decimal

from pms.application.dto import ProfitReportDTO
from pms.domain.repository.order_repository import OrderRepository


class ProfitReportHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> ProfitReportDTO:
        orders = self._order_repo.list_all()
        total_value = sum((o.total_cost.amount for o in orders), Decimal("0"))
        total_net_value = sum((o.total_net_cost.amount for o in orders), Decimal("0"))
        return ProfitReportDTO(
            order_count=len(orders),
            total_value=total_value,
            total_net_value=total_net_value,
            profit_margin=total_value - total_net_value,
        )
