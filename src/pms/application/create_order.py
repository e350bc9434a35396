"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Builds an order from products the operator picked by hand, each with a
quantity and a free-text note.

Everything is resolved and validated before the single ``save()``: an
unknown product, a bad quantity or a stock shortfall on any line leaves
no order behind.
"""

from __future__ import annotations

import logging

from pms.application.dto import OrderDTO, ProductSelection, to_order_dto
from pms.domain.exceptions import ProductNotFoundError, ValidationError
from pms.domain.model.order import Order, OrderLineItem
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Quantity
from pms.domain.repository.order_repository import OrderRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, selections: list[ProductSelection]) -> OrderDTO:
        """Create a new pending order.

        Steps:
        1. Resolve each product ID to a Product (fail if not found).
        2. Build OrderLineItems with *current* name/price/cost (snapshot).
        3. Check that stock covers the quantity requested per product.
        4. Let the Order aggregate validate, persist and return a DTO.
        """
        if not selections:
            raise ValidationError("Order must contain at least one item")

        products: dict[str, Product] = {}
        line_items: list[OrderLineItem] = []

        for selection in selections:
            product = products.get(selection.product_id)
            if product is None:
                product = self._product_repo.get_by_id(selection.product_id)
            if product is None:
                raise ProductNotFoundError(
                    f"Product #{selection.product_id} not found"
                )
            products[selection.product_id] = product

            line_items.append(
                OrderLineItem(
                    product_id=selection.product_id,
                    product_name=product.name,
                    quantity=Quantity(selection.quantity),
                    unit_price=product.price,  # <-- price snapshot
                    unit_cost=product.cost,  # <-- cost snapshot
                    details=(selection.details or "").strip(),
                )
            )

        order = Order.create(items=line_items)
        StockService.check_availability(order.requested_quantities, products)

        self._order_repo.save(order)
        logger.info(
            "Order #%s created with %d line(s), total %s",
            order.id, len(order.items), order.total_cost,
        )
        return to_order_dto(order)
