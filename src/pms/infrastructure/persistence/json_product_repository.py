"""JSON-document implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money
from pms.domain.repository.product_repository import ProductRepository
from pms.infrastructure.persistence.json_document_store import Document, JsonCollection


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return str(self._collection.next_id())

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._collection.find_by_id(product_id)
        return self._collection.decode(raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Product]:
        return self._collection.decode_all(self._to_domain)

    def list_by_category(self, category_id: str) -> list[Product]:
        return self._collection.decode_all(
            self._to_domain, lambda d: d["category_id"] == category_id
        )

    def list_by_supplier(self, supplier_id: str) -> list[Product]:
        return self._collection.decode_all(
            self._to_domain, lambda d: d.get("supplier_id") == supplier_id
        )

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._collection.save(self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> Document:
        return {
            "id": product.id,
            "name": product.name,
            "category_id": product.category_id,
            "supplier_id": product.supplier_id,
            "price": str(product.price.amount),
            "cost": str(product.cost.amount),
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(raw: Document) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category_id=raw["category_id"],
            supplier_id=raw.get("supplier_id"),
            price=Money(Decimal(raw["price"])),
            cost=Money(Decimal(raw["cost"])),
            stock=raw["stock"],
        )
