"""JSON-document implementation of OrderRepository.

Totals are written alongside the line items so the raw documents are
self-describing, but they are always recomputed from the line-item
snapshots when an order is loaded.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pms.domain.model.order import Order, OrderLineItem, OrderStatus
from pms.domain.model.value_objects import Money, Quantity
from pms.domain.repository.order_repository import OrderRepository
from pms.infrastructure.persistence.json_document_store import Document, JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._collection.next_id()

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._collection.find_by_id(order_id)
        return self._collection.decode(raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Order]:
        return self._collection.decode_all(self._to_domain)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._collection.save(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> Document:
        return {
            "id": order.id,
            "offer_id": order.offer_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "unit_cost": str(item.unit_cost.amount),
                    "details": item.details,
                }
                for item in order.items
            ],
            "total_cost": str(order.total_cost.amount),
            "total_net_cost": str(order.total_net_cost.amount),
        }

    @staticmethod
    def _to_domain(raw: Document) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
                unit_cost=Money(Decimal(i["unit_cost"])),
                details=i.get("details", ""),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            items=items,
            offer_id=raw.get("offer_id"),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
