"""Tests for the JSON document store and the repositories built on it."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from pms.domain.exceptions import StoreError
from pms.domain.model.category import Category
from pms.domain.model.offer import Offer
from pms.domain.model.order import Order, OrderLineItem, OrderStatus
from pms.domain.model.product import Product
from pms.domain.model.supplier import Supplier
from pms.domain.model.value_objects import Money, Quantity
from pms.infrastructure.persistence.json_category_repository import JsonCategoryRepository
from pms.infrastructure.persistence.json_document_store import JsonCollection
from pms.infrastructure.persistence.json_offer_repository import JsonOfferRepository
from pms.infrastructure.persistence.json_order_repository import JsonOrderRepository
from pms.infrastructure.persistence.json_product_repository import JsonProductRepository
from pms.infrastructure.persistence.json_supplier_repository import JsonSupplierRepository


def _product(name="Laptop", category_id="1", supplier_id=None, stock=5) -> Product:
    return Product(
        id=None,
        name=name,
        category_id=category_id,
        supplier_id=supplier_id,
        price=Money.of("1000.00"),
        cost=Money.of("800.50"),
        stock=stock,
    )


class TestJsonCollection:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "things.json"
        JsonCollection(path)
        assert path.read_text(encoding="utf-8") == "[]"

    def test_upsert(self, tmp_path):
        coll = JsonCollection(tmp_path / "things.json")
        coll.save({"id": 1, "name": "a"})
        coll.save({"id": 2, "name": "b"})
        coll.save({"id": 1, "name": "c"})
        assert coll.find() == [{"id": 1, "name": "c"}, {"id": 2, "name": "b"}]

    def test_find_with_predicate(self, tmp_path):
        coll = JsonCollection(tmp_path / "things.json")
        coll.save({"id": 1, "n": 1})
        coll.save({"id": 2, "n": 5})
        assert coll.find(lambda d: d["n"] > 2) == [{"id": 2, "n": 5}]

    def test_next_id_handles_string_ids(self, tmp_path):
        coll = JsonCollection(tmp_path / "things.json")
        assert coll.next_id() == 1
        coll.save({"id": "9"})
        assert coll.next_id() == 10

    def test_save_without_id_rejected(self, tmp_path):
        coll = JsonCollection(tmp_path / "things.json")
        with pytest.raises(StoreError, match="without an id"):
            coll.save({"name": "x"})

    def test_corrupt_file_raises_store_error(self, tmp_path):
        path = tmp_path / "things.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError, match="Could not read"):
            JsonCollection(path).find()

    def test_non_array_raises_store_error(self, tmp_path):
        path = tmp_path / "things.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(StoreError, match="JSON array"):
            JsonCollection(path).find()


class TestJsonCatalogRepositories:

    def test_category_round_trip(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        category = Category.create("Electronics", "Gadgets")
        repo.save(category)
        assert category.id == "1"
        assert repo.get_by_id("1") == category
        assert repo.get_by_name("ELECTRONICS") == category
        assert repo.get_by_name("Clothing") is None

    def test_supplier_round_trip(self, tmp_path):
        repo = JsonSupplierRepository(tmp_path / "suppliers.json")
        supplier = Supplier.create("Acme", "Jane", "Parts")
        repo.save(supplier)
        assert repo.list_all() == [supplier]

    def test_product_round_trip(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = _product(supplier_id="2")
        repo.save(product)
        loaded = repo.get_by_id(product.id)
        assert loaded == product
        assert loaded.cost.amount == Decimal("800.50")

    def test_product_filters(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("Laptop", category_id="1", supplier_id="1"))
        repo.save(_product("T-shirt", category_id="2", supplier_id="1"))
        repo.save(_product("Shampoo", category_id="2"))
        assert [p.name for p in repo.list_by_category("2")] == ["T-shirt", "Shampoo"]
        assert [p.name for p in repo.list_by_supplier("1")] == ["Laptop", "T-shirt"]

    def test_product_stock_update_persists(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = _product(stock=2)
        repo.save(product)
        product.decrement_stock(3)
        repo.save(product)
        assert JsonProductRepository(tmp_path / "products.json").get_by_id(product.id).stock == -1

    def test_offer_round_trip_and_queries(self, tmp_path):
        repo = JsonOfferRepository(tmp_path / "offers.json")
        cheap = Offer.create(["1", "2"], Money.of("30"), name="Basics")
        pricey = Offer.create(["2", "3"], Money.of("1800"), active=False)
        repo.save(cheap)
        repo.save(pricey)
        assert repo.get_by_id(cheap.id) == cheap
        assert repo.list_by_price_range(Decimal("0"), Decimal("30")) == [cheap]
        assert [o.id for o in repo.list_containing_product("2")] == [cheap.id, pricey.id]
        assert repo.get_by_id(pricey.id).active is False


class TestJsonOrderRepository:

    def _order(self) -> Order:
        items = [
            OrderLineItem(
                product_id="1",
                product_name="Laptop",
                quantity=Quantity(2),
                unit_price=Money.of("1000"),
                unit_cost=Money.of("800"),
                details="Label 2442",
            ),
        ]
        return Order(
            id=None,
            items=items,
            offer_id="4",
            created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.save(order)
        assert order.id == 1
        loaded = repo.get_by_id(1)
        assert loaded == order
        assert loaded.total_cost == Money.of("2000")
        assert loaded.total_net_cost == Money.of("1600")

    def test_totals_written_to_document(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(self._order())
        raw = JsonCollection(tmp_path / "orders.json").find_by_id(1)
        assert raw["total_cost"] == "2000.00"
        assert raw["total_net_cost"] == "1600.00"
        assert raw["status"] == "Pending"

    def test_status_update(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.save(order)
        order.mark_shipped()
        repo.save(order)
        assert repo.get_by_id(1).status == OrderStatus.SHIPPED
        assert len(repo.list_all()) == 1

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(1) is None


class TestMalformedDocuments:

    def _write(self, path, text):
        path.write_text(text, encoding="utf-8")
        return path

    def test_missing_key(self, tmp_path):
        path = self._write(tmp_path / "products.json", '[{"id": "1", "name": "x"}]')
        with pytest.raises(StoreError, match="Malformed document #1"):
            JsonProductRepository(path).list_all()
        with pytest.raises(StoreError, match="Malformed"):
            JsonProductRepository(path).get_by_id("1")

    def test_missing_key_in_filter(self, tmp_path):
        path = self._write(tmp_path / "products.json", '[{"id": "1", "name": "x"}]')
        with pytest.raises(StoreError, match="Malformed"):
            JsonProductRepository(path).list_by_category("1")

    def test_bad_number(self, tmp_path):
        path = self._write(
            tmp_path / "offers.json",
            '[{"id": "1", "product_ids": ["1"], "price": "cheap",'
            ' "created_at": "2024-05-01T12:00:00+00:00"}]',
        )
        repo = JsonOfferRepository(path)
        with pytest.raises(StoreError, match="Malformed"):
            repo.list_all()
        with pytest.raises(StoreError, match="Malformed"):
            repo.list_by_price_range(Decimal("0"), Decimal("10"))

    def test_invalid_domain_value(self, tmp_path):
        path = self._write(
            tmp_path / "products.json",
            '[{"id": "1", "name": "x", "category_id": "1",'
            ' "price": "-5", "cost": "1", "stock": 0}]',
        )
        with pytest.raises(StoreError, match="Malformed document #1"):
            JsonProductRepository(path).list_all()

    def test_bad_order_status(self, tmp_path):
        path = self._write(
            tmp_path / "orders.json",
            '[{"id": 1, "status": "Lost", "created_at": "2024-05-01T12:00:00+00:00",'
            ' "items": []}]',
        )
        with pytest.raises(StoreError, match="Malformed"):
            JsonOrderRepository(path).get_by_id(1)

    def test_non_numeric_id(self, tmp_path):
        path = self._write(tmp_path / "categories.json", '[{"id": "abc", "name": "x"}]')
        with pytest.raises(StoreError, match="Malformed"):
            JsonCategoryRepository(path).next_id()

    def test_non_object_entry(self, tmp_path):
        path = self._write(tmp_path / "suppliers.json", '[1, 2]')
        with pytest.raises(StoreError, match="JSON array of objects"):
            JsonSupplierRepository(path).list_all()
