"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from decimal import Decimal

from pms.domain.exceptions import StoreError
from pms.domain.model.category import Category
from pms.domain.model.offer import Offer
from pms.domain.model.order import Order
from pms.domain.model.product import Product
from pms.domain.model.supplier import Supplier
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.order_repository import OrderRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[str, Category] = {}
        for c in categories or []:
            self._store[c.id] = c

    def next_id(self) -> str:
        return str(max((int(k) for k in self._store), default=0) + 1)

    def get_by_id(self, category_id: str) -> Category | None:
        return self._store.get(category_id)

    def get_by_name(self, name: str) -> Category | None:
        for c in self._store.values():
            if c.name.lower() == name.lower():
                return c
        return None

    def list_all(self) -> list[Category]:
        return list(self._store.values())

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self.next_id()
        self._store[category.id] = category


class FakeSupplierRepository(SupplierRepository):

    def __init__(self, suppliers: list[Supplier] | None = None) -> None:
        self._store: dict[str, Supplier] = {}
        for s in suppliers or []:
            self._store[s.id] = s

    def next_id(self) -> str:
        return str(max((int(k) for k in self._store), default=0) + 1)

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        return self._store.get(supplier_id)

    def list_all(self) -> list[Supplier]:
        return list(self._store.values())

    def save(self, supplier: Supplier) -> None:
        if supplier.id is None:
            supplier.id = self.next_id()
        self._store[supplier.id] = supplier


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        return str(max((int(k) for k in self._store), default=0) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_by_category(self, category_id: str) -> list[Product]:
        return [p for p in self._store.values() if p.category_id == category_id]

    def list_by_supplier(self, supplier_id: str) -> list[Product]:
        return [p for p in self._store.values() if p.supplier_id == supplier_id]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        """Test helper: simulate a product removed from the catalog."""
        del self._store[product_id]


class FailingProductRepository(FakeProductRepository):
    """Raises StoreError on the n-th call to ``save`` (1-based)."""

    def __init__(self, products: list[Product], fail_on_save: int) -> None:
        super().__init__(products)
        self._fail_on_save = fail_on_save
        self.save_calls = 0

    def save(self, product: Product) -> None:
        self.save_calls += 1
        if self.save_calls == self._fail_on_save:
            raise StoreError(f"Could not write product #{product.id}")
        super().save(product)


class FakeOfferRepository(OfferRepository):

    def __init__(self, offers: list[Offer] | None = None) -> None:
        self._store: dict[str, Offer] = {}
        for o in offers or []:
            self._store[o.id] = o

    def next_id(self) -> str:
        return str(max((int(k) for k in self._store), default=0) + 1)

    def get_by_id(self, offer_id: str) -> Offer | None:
        return self._store.get(offer_id)

    def list_all(self) -> list[Offer]:
        return list(self._store.values())

    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Offer]:
        return [o for o in self._store.values() if min_price <= o.price.amount <= max_price]

    def list_containing_product(self, product_id: str) -> list[Offer]:
        return [o for o in self._store.values() if o.contains(product_id)]

    def save(self, offer: Offer) -> None:
        if offer.id is None:
            offer.id = self.next_id()
        self._store[offer.id] = offer


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        for o in orders or []:
            self.save(o)

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
        self._next_id = max(self._next_id, order.id + 1)
        self._store[order.id] = order
