"""Application service: List Sales Orders use case (query)."""

from __future__ import annotations

from pms.application.dto import SalesOrdersDTO, to_order_dto
from pms.domain.model.value_objects import Money
from pms.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None) -> SalesOrdersDTO:
        """Every order (optionally only one status) plus their summed value."""
        orders = self._order_repo.list_all()
        if status is not None:
            orders = [o for o in orders if o.status.value.lower() == status.lower()]

        total = Money.total(o.total_cost for o in orders)

        return SalesOrdersDTO(
            orders=[to_order_dto(o) for o in orders],
            total_value=str(total),
        )
