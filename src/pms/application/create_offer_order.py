"""Application service: Create Order from Offer use case.

One line item is created per member product of the offer, snapshotting
the *product's* name, price and cost.  Order totals therefore track the
real line-item economics; the offer's bundle price is a sales price and
is not used for them.
"""

from __future__ import annotations

import logging

from pms.application.dto import OrderDTO, to_order_dto
from pms.domain.exceptions import (
    EmptyOfferError,
    OfferInactiveError,
    OfferNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from pms.domain.model.order import Order, OrderLineItem
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Quantity
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.order_repository import OrderRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)

DEFAULT_LINE_QUANTITY = 1


class CreateOfferOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        offer_repo: OfferRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._offer_repo = offer_repo
        self._product_repo = product_repo

    def handle(
        self,
        offer_id: str,
        quantities: dict[str, int | None] | None = None,
    ) -> OrderDTO:
        """Create a pending order for every product in an offer.

        Args:
            offer_id: The offer being purchased.
            quantities: Optional mapping of product ID -> quantity.  Products
                missing from the mapping (or mapped to None) get quantity 1.
        """
        offer = self._offer_repo.get_by_id(offer_id)
        if offer is None:
            raise OfferNotFoundError(f"Offer #{offer_id} not found")
        if offer.is_empty:
            raise EmptyOfferError(f"Offer #{offer_id} contains no products")
        if not offer.active:
            raise OfferInactiveError(f"Offer #{offer_id} is no longer active")

        quantities = quantities or {}
        unknown = [pid for pid in quantities if not offer.contains(pid)]
        if unknown:
            raise ValidationError(
                f"Product(s) {', '.join(unknown)} are not part of offer #{offer_id}"
            )

        products: dict[str, Product] = {}
        line_items: list[OrderLineItem] = []

        for product_id in offer.product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(
                    f"Product #{product_id} in offer #{offer_id} not found"
                )
            products[product_id] = product

            qty = quantities.get(product_id)
            line_items.append(
                OrderLineItem(
                    product_id=product_id,
                    product_name=product.name,
                    quantity=Quantity(DEFAULT_LINE_QUANTITY if qty is None else qty),
                    unit_price=product.price,
                    unit_cost=product.cost,
                )
            )

        order = Order.create(items=line_items, offer_id=offer.id)
        StockService.check_availability(order.requested_quantities, products)

        self._order_repo.save(order)
        logger.info(
            "Order #%s created from offer #%s, total %s",
            order.id, offer.id, order.total_cost,
        )
        return to_order_dto(order)
