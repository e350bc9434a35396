"""JSON-document implementation of OfferRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pms.domain.model.offer import Offer
from pms.domain.model.value_objects import Money
from pms.domain.repository.offer_repository import OfferRepository
from pms.infrastructure.persistence.json_document_store import Document, JsonCollection


class JsonOfferRepository(OfferRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- OfferRepository interface --------------------------------------------

    def next_id(self) -> str:
        return str(self._collection.next_id())

    def get_by_id(self, offer_id: str) -> Offer | None:
        raw = self._collection.find_by_id(offer_id)
        return self._collection.decode(raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Offer]:
        return self._collection.decode_all(self._to_domain)

    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Offer]:
        return self._collection.decode_all(
            self._to_domain, lambda d: min_price <= Decimal(d["price"]) <= max_price
        )

    def list_containing_product(self, product_id: str) -> list[Offer]:
        return self._collection.decode_all(
            self._to_domain, lambda d: product_id in d["product_ids"]
        )

    def save(self, offer: Offer) -> None:
        if offer.id is None:
            offer.id = self.next_id()
        self._collection.save(self._to_raw(offer))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(offer: Offer) -> Document:
        return {
            "id": offer.id,
            "name": offer.name,
            "product_ids": list(offer.product_ids),
            "price": str(offer.price.amount),
            "active": offer.active,
            "created_at": offer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: Document) -> Offer:
        return Offer(
            id=raw["id"],
            name=raw.get("name"),
            product_ids=list(raw.get("product_ids", [])),
            price=Money(Decimal(raw["price"])),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
