"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pms.domain.exceptions import AlreadyShippedError, ValidationError
from pms.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures a snapshot of a product at order-creation time.

    ``product_name``, ``unit_price`` and ``unit_cost`` are copied from the
    product when the order is built and never change afterwards, even if
    the product is edited or removed from the catalog.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    unit_cost: Money  # locked at order-creation time
    details: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def line_net_total(self) -> Money:
        return self.unit_cost * self.quantity.value


@dataclass
class Order:
    """Aggregate root for sales orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.

    An order is created once (PENDING) and mutated exactly once
    afterwards, by ``mark_shipped()``.
    """

    id: int | None
    items: list[OrderLineItem]
    offer_id: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        items: list[OrderLineItem],
        offer_id: str | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(id=None, items=list(items), offer_id=offer_id)

    # --- State transitions ----------------------------------------------------

    def mark_shipped(self) -> None:
        """Transition PENDING -> SHIPPED.

        Stock must be decremented *before* calling this (coordinated by
        the application handler via the stock service).
        """
        if self.status == OrderStatus.SHIPPED:
            raise AlreadyShippedError(f"Order #{self.id} is already shipped")
        self.status = OrderStatus.SHIPPED

    # --- Computed properties --------------------------------------------------

    @property
    def is_shipped(self) -> bool:
        return self.status == OrderStatus.SHIPPED

    @property
    def total_cost(self) -> Money:
        """Sum of unit price x quantity over every line."""
        return Money.total(item.line_total for item in self.items)

    @property
    def total_net_cost(self) -> Money:
        """Sum of unit cost x quantity over every line."""
        return Money.total(item.line_net_total for item in self.items)

    @property
    def requested_quantities(self) -> dict[str, int]:
        """Total quantity per product id, across all lines."""
        totals: dict[str, int] = {}
        for item in self.items:
            totals[item.product_id] = totals.get(item.product_id, 0) + item.quantity.value
        return totals
