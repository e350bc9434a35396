"""JSON-document implementation of SupplierRepository."""

from __future__ import annotations

from pathlib import Path

from pms.domain.model.supplier import Supplier
from pms.domain.repository.supplier_repository import SupplierRepository
from pms.infrastructure.persistence.json_document_store import Document, JsonCollection


class JsonSupplierRepository(SupplierRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- SupplierRepository interface -----------------------------------------

    def next_id(self) -> str:
        return str(self._collection.next_id())

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        raw = self._collection.find_by_id(supplier_id)
        return self._collection.decode(raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Supplier]:
        return self._collection.decode_all(self._to_domain)

    def save(self, supplier: Supplier) -> None:
        if supplier.id is None:
            supplier.id = self.next_id()
        self._collection.save(self._to_raw(supplier))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(supplier: Supplier) -> Document:
        return {
            "id": supplier.id,
            "name": supplier.name,
            "contact": supplier.contact,
            "description": supplier.description,
        }

    @staticmethod
    def _to_domain(raw: Document) -> Supplier:
        return Supplier(
            id=raw["id"],
            name=raw["name"],
            contact=raw.get("contact", ""),
            description=raw.get("description"),
        )
