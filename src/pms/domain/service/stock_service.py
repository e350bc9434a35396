"""Domain service: Stock.

Coordinates the cross-aggregate stock rules between orders and products:

* at build time, every requested quantity must be covered by the
  product's current stock (nothing is reserved, only checked);
* at shipment time, each line item's quantity is subtracted from its
  product's stock.

Shipment deduction is applied line by line with one save per product and
is NOT rolled back if a later save fails.  The store offers no
transactions and the tool assumes a single writer, so a concurrent edit
between order creation and shipment can also drive stock negative.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pms.domain.exceptions import InsufficientStockError
from pms.domain.model.order import Order
from pms.domain.model.product import Product
from pms.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockAdjustment:
    product_id: str
    product_name: str
    previous_stock: int
    new_stock: int


@dataclass
class DeductionResult:
    adjustments: list[StockAdjustment] = field(default_factory=list)
    skipped_product_ids: list[str] = field(default_factory=list)


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    @staticmethod
    def check_availability(
        requested: dict[str, int],
        products: dict[str, Product],
    ) -> None:
        """Fail if any product cannot cover the total quantity requested.

        ``requested`` maps product id to the summed quantity across every
        line naming that product.  Pure check; nothing is mutated.
        """
        for product_id, qty in requested.items():
            product = products[product_id]
            if not product.can_supply(qty):
                raise InsufficientStockError(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {product.stock} in stock)"
                )

    def deduct_for_order(self, order: Order) -> DeductionResult:
        """Subtract every line item's quantity from its product's stock.

        Products deleted since the order was built are skipped.  Store
        errors propagate; earlier deductions stay applied.
        """
        result = DeductionResult()

        for line in order.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Order #%s: product %s (%s) no longer exists, stock not updated",
                    order.id, line.product_id, line.product_name,
                )
                result.skipped_product_ids.append(line.product_id)
                continue

            previous = product.stock
            product.decrement_stock(line.quantity.value)
            self._product_repo.save(product)

            if product.stock < 0:
                logger.warning(
                    "Stock for %s is now negative (%d)", product.name, product.stock
                )
            logger.info(
                "Stock for %s: %d -> %d", product.name, previous, product.stock
            )
            result.adjustments.append(
                StockAdjustment(
                    product_id=line.product_id,
                    product_name=product.name,
                    previous_stock=previous,
                    new_stock=product.stock,
                )
            )

        return result
