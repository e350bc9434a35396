"""Application service: Ship Order use case.

Orchestrates the domain service (stock deduction) and the Order
aggregate (state transition) to ship a pending order.

Shipping is idempotent: an order that is already shipped is reported
as ``ALREADY_SHIPPED`` and nothing is touched.  Stock is deducted line
by line before the status changes; if a save fails halfway, the earlier
deductions remain and the order stays pending.
"""

from __future__ import annotations

import logging

from pms.application.dto import ShipmentDTO, ShipmentOutcome, StockChangeDTO
from pms.domain.exceptions import OrderNotFoundError
from pms.domain.repository.order_repository import OrderRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class ShipOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> ShipmentDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")

        if order.is_shipped:
            logger.info("Order #%s is already shipped, nothing to do", order_id)
            return ShipmentDTO(
                order_id=order_id,
                outcome=ShipmentOutcome.ALREADY_SHIPPED,
                stock_changes=[],
                skipped_product_ids=[],
            )

        # Deduct stock first, then transition the order
        svc = StockService(self._product_repo)
        deduction = svc.deduct_for_order(order)

        order.mark_shipped()
        self._order_repo.save(order)
        logger.info("Order #%s shipped", order_id)

        return ShipmentDTO(
            order_id=order_id,
            outcome=ShipmentOutcome.SHIPPED,
            stock_changes=[
                StockChangeDTO(
                    product_id=adj.product_id,
                    product_name=adj.product_name,
                    previous_stock=adj.previous_stock,
                    new_stock=adj.new_stock,
                )
                for adj in deduction.adjustments
            ],
            skipped_product_ids=list(deduction.skipped_product_ids),
        )
