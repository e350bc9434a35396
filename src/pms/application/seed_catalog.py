"""Application service: Seed the catalog with sample data.

Goes through the regular use-case handlers so the sample data obeys the
same rules as operator input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pms.application.add_category import AddCategoryHandler
from pms.application.add_product import AddProductHandler
from pms.application.add_supplier import AddSupplierHandler
from pms.application.create_offer import CreateOfferHandler
from pms.application.create_order import CreateOrderHandler
from pms.application.dto import ProductSelection
from pms.domain.exceptions import ValidationError
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.order_repository import OrderRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = [
    ("Electronics", "Electronic gadgets and devices"),
    ("Clothing", "Fashionable clothing and accessories"),
    ("Home Appliances", "Home appliances and kitchen equipment"),
    ("Beauty & Personal Care", "Beauty and personal care products"),
    ("Sports & Outdoors", "Sports and outdoor equipment"),
]

SAMPLE_SUPPLIERS = [
    ("Electronics Supplier Inc.", "John Doe (john@electronicsupplier.com)"),
    ("Fashion Supplier Co.", "Jane Smith (jane@fashionsupplier.com)"),
    ("Home Appliance Supplier Ltd.", "Michael Johnson (michael@homeappliancesupplier.com)"),
]

# name, category, supplier index, price, cost, stock
SAMPLE_PRODUCTS = [
    ("Laptop", "Electronics", 0, "1000", "800", 50),
    ("Smartphone", "Electronics", 0, "800", "600", 40),
    ("T-shirt", "Clothing", 1, "20", "10", 100),
    ("Refrigerator", "Home Appliances", 2, "1200", "1000", 30),
    ("Shampoo", "Beauty & Personal Care", 1, "10", "5", 80),
    ("Soccer Ball", "Sports & Outdoors", 2, "30", "20", 60),
]

# product indexes, bundle price, active
SAMPLE_OFFERS = [
    ([0, 1], "1800", True),
    ([2, 4], "30", True),
    ([3, 1, 5], "1830", False),
]


@dataclass(frozen=True)
class SeedSummary:
    categories: int
    suppliers: int
    products: int
    offers: int
    orders: int


class SeedCatalogHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
        product_repo: ProductRepository,
        offer_repo: OfferRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._category_repo = category_repo
        self._supplier_repo = supplier_repo
        self._product_repo = product_repo
        self._offer_repo = offer_repo
        self._order_repo = order_repo

    def handle(self, force: bool = False) -> SeedSummary:
        if not force and self._has_data():
            raise ValidationError("Catalog is not empty; use --force to seed anyway")

        add_category = AddCategoryHandler(self._category_repo)
        add_supplier = AddSupplierHandler(self._supplier_repo)
        add_product = AddProductHandler(
            self._product_repo, self._category_repo, self._supplier_repo
        )
        create_offer = CreateOfferHandler(self._offer_repo, self._product_repo)
        create_order = CreateOrderHandler(self._order_repo, self._product_repo)

        categories = {}
        created_categories = 0
        for name, description in SAMPLE_CATEGORIES:
            existing = self._category_repo.get_by_name(name)
            if existing is None:
                existing = add_category.handle(name, description)
                created_categories += 1
            categories[name] = existing

        suppliers = [
            add_supplier.handle(name, contact) for name, contact in SAMPLE_SUPPLIERS
        ]

        products = [
            add_product.handle(
                name=name,
                category_id=categories[category].id,
                price=price,
                cost=cost,
                stock=stock,
                supplier_id=suppliers[supplier].id,
            )
            for name, category, supplier, price, cost, stock in SAMPLE_PRODUCTS
        ]

        for indexes, price, active in SAMPLE_OFFERS:
            create_offer.handle(
                product_ids=[products[i].id for i in indexes],
                price=price,
                active=active,
            )

        create_order.handle(
            [ProductSelection(product_id=products[0].id, quantity=1, details="Label 2442")]
        )

        summary = SeedSummary(
            categories=created_categories,
            suppliers=len(suppliers),
            products=len(products),
            offers=len(SAMPLE_OFFERS),
            orders=1,
        )
        logger.info("Seeded sample catalog: %s", summary)
        return summary

    def _has_data(self) -> bool:
        repos = (
            self._category_repo,
            self._supplier_repo,
            self._product_repo,
            self._offer_repo,
            self._order_repo,
        )
        return any(repo.list_all() for repo in repos)
