"""Offer aggregate: a fixed-price bundle of existing products.

The bundle price is set independently by the operator.  It is never
derived from (or kept in sync with) the member products' prices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from pms.domain.exceptions import EmptyOfferError
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money


class StockAvailability(Enum):
    ALL_IN_STOCK = "all in stock"
    SOME_IN_STOCK = "some in stock"
    NONE_IN_STOCK = "none in stock"


def classify_availability(products: Iterable[Product]) -> StockAvailability:
    """Bucket a set of products by the fraction of them with stock > 0.

    An empty set counts as 0% in stock.
    """
    products = list(products)
    available = sum(1 for p in products if p.in_stock)
    if products and available == len(products):
        return StockAvailability.ALL_IN_STOCK
    if available > 0:
        return StockAvailability.SOME_IN_STOCK
    return StockAvailability.NONE_IN_STOCK


@dataclass
class Offer:
    """Aggregate root for product bundles.

    ``active`` is cleared when the offer is no longer sold; offers are
    never physically deleted because historical orders point at them.
    """

    id: str | None
    product_ids: list[str]
    price: Money
    active: bool = True
    name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_ids: list[str],
        price: Money,
        name: str | None = None,
        active: bool = True,
    ) -> Offer:
        """Create a new offer.  Duplicate product ids are collapsed."""
        unique_ids = list(dict.fromkeys(pid for pid in product_ids if pid))
        if not unique_ids:
            raise EmptyOfferError("Offer must contain at least one product")
        name = name.strip() if name else None
        return Offer(
            id=None,
            product_ids=unique_ids,
            price=price,
            active=active,
            name=name or None,
        )

    @property
    def is_empty(self) -> bool:
        return not self.product_ids

    def contains(self, product_id: str) -> bool:
        return product_id in self.product_ids

    @property
    def label(self) -> str:
        return self.name or f"Offer #{self.id}"
