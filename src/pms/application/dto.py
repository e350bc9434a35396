"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pms.domain.model.order import Order


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class ProductSelection:
    """Input: a product the operator picked, with quantity and a note."""

    product_id: str
    quantity: int
    details: str = ""


# --- Catalog -----------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category_name: str | None
    supplier_name: str | None
    price: str
    cost: str
    stock: int


@dataclass(frozen=True)
class OfferProductDTO:
    """A member product of an offer, with its *current* catalog values."""

    id: str
    name: str
    price: str
    cost: str
    stock: int
    category_name: str | None
    supplier_name: str | None


@dataclass(frozen=True)
class OfferDTO:
    id: str
    label: str
    price: str
    active: bool
    products: list[OfferProductDTO]


# --- Orders ------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    unit_cost: str
    line_total: str
    details: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    offer_id: str | None
    items: list[OrderLineItemDTO]
    total_cost: str
    total_net_cost: str
    created_at: str


class ShipmentOutcome(Enum):
    SHIPPED = "Shipped"
    ALREADY_SHIPPED = "AlreadyShipped"


@dataclass(frozen=True)
class StockChangeDTO:
    product_id: str
    product_name: str
    previous_stock: int
    new_stock: int


@dataclass(frozen=True)
class ShipmentDTO:
    order_id: int
    outcome: ShipmentOutcome
    stock_changes: list[StockChangeDTO]
    skipped_product_ids: list[str]


# --- Reports -----------------------------------------------------------------


@dataclass(frozen=True)
class OfferAvailabilityDTO:
    offer_id: str
    label: str
    availability: str  # "all in stock" | "some in stock" | "none in stock"
    in_stock_count: int
    product_count: int


@dataclass(frozen=True)
class StockAvailabilityReportDTO:
    all_in_stock: int
    some_in_stock: int
    none_in_stock: int
    offers: list[OfferAvailabilityDTO]


@dataclass(frozen=True)
class ProfitReportDTO:
    """Totals across every order, pending or shipped."""

    order_count: int
    total_value: Decimal
    total_net_value: Decimal
    profit_margin: Decimal  # may be negative


@dataclass(frozen=True)
class OfferMarginDTO:
    offer_id: str
    label: str
    price: str
    products: list[OfferProductDTO]
    total_net_cost: str  # sum of member product costs


@dataclass(frozen=True)
class SalesOrdersDTO:
    orders: list[OrderDTO]
    total_value: str


# --- Mapping -----------------------------------------------------------------


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        offer_id=order.offer_id,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                unit_cost=str(item.unit_cost),
                line_total=str(item.line_total),
                details=item.details,
            )
            for item in order.items
        ],
        total_cost=str(order.total_cost),
        total_net_cost=str(order.total_net_cost),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
