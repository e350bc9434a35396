"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pms.infrastructure.config import Settings
from pms.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from pms.infrastructure.persistence.json_offer_repository import (
    JsonOfferRepository,
)
from pms.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from pms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pms.infrastructure.persistence.json_supplier_repository import (
    JsonSupplierRepository,
)


def category_repository(settings: Settings) -> JsonCategoryRepository:
    return JsonCategoryRepository(settings.data_dir / "categories.json")


def supplier_repository(settings: Settings) -> JsonSupplierRepository:
    return JsonSupplierRepository(settings.data_dir / "suppliers.json")


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def offer_repository(settings: Settings) -> JsonOfferRepository:
    return JsonOfferRepository(settings.data_dir / "offers.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")
