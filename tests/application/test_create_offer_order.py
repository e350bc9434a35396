"""Integration tests for the CreateOfferOrder use case."""

import pytest

from pms.application.create_offer_order import CreateOfferOrderHandler
from pms.domain.exceptions import (
    EmptyOfferError,
    InsufficientStockError,
    InvalidQuantityError,
    OfferInactiveError,
    OfferNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from pms.domain.model.offer import Offer
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money
from tests.fakes import FakeOfferRepository, FakeOrderRepository, FakeProductRepository


def _setup():
    products = [
        Product(id="1", name="Laptop", category_id="1",
                price=Money.of("1000"), cost=Money.of("800"), stock=50),
        Product(id="2", name="Smartphone", category_id="1",
                price=Money.of("800"), cost=Money.of("600"), stock=2),
    ]
    offers = [
        Offer(id="1", product_ids=["1", "2"], price=Money.of("1500")),
        Offer(id="2", product_ids=[], price=Money.of("10")),
        Offer(id="3", product_ids=["1"], price=Money.of("900"), active=False),
        Offer(id="4", product_ids=["1", "42"], price=Money.of("900")),
    ]
    order_repo = FakeOrderRepository()
    offer_repo = FakeOfferRepository(offers)
    product_repo = FakeProductRepository(products)
    handler = CreateOfferOrderHandler(order_repo, offer_repo, product_repo)
    return handler, order_repo


class TestCreateOfferOrderHappyPath:

    def test_one_line_per_offer_product(self):
        handler, _ = _setup()
        dto = handler.handle("1")
        assert [i.product_name for i in dto.items] == ["Laptop", "Smartphone"]
        assert all(i.quantity == 1 for i in dto.items)
        assert all(i.details == "" for i in dto.items)

    def test_totals_come_from_products_not_bundle_price(self):
        handler, _ = _setup()
        dto = handler.handle("1")
        assert dto.total_cost == "$1800.00"  # bundle price is $1500
        assert dto.total_net_cost == "$1400.00"

    def test_offer_reference_set(self):
        handler, order_repo = _setup()
        dto = handler.handle("1")
        assert dto.offer_id == "1"
        assert order_repo.get_by_id(dto.id).offer_id == "1"

    def test_per_product_quantities(self):
        handler, _ = _setup()
        dto = handler.handle("1", {"1": 3})
        quantities = {i.product_id: i.quantity for i in dto.items}
        assert quantities == {"1": 3, "2": 1}
        assert dto.total_cost == "$3800.00"
        assert dto.total_net_cost == "$3000.00"

    def test_none_quantity_means_default(self):
        handler, _ = _setup()
        dto = handler.handle("1", {"2": None})
        assert [i.quantity for i in dto.items] == [1, 1]


class TestCreateOfferOrderValidation:

    def test_unknown_offer_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(OfferNotFoundError, match="Offer #9 not found"):
            handler.handle("9")
        assert order_repo.list_all() == []

    def test_empty_offer_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(EmptyOfferError):
            handler.handle("2")
        assert order_repo.list_all() == []

    def test_inactive_offer_rejected(self):
        handler, _ = _setup()
        with pytest.raises(OfferInactiveError, match="no longer active"):
            handler.handle("3")

    def test_deleted_member_product_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ProductNotFoundError, match="#42"):
            handler.handle("4")
        assert order_repo.list_all() == []

    def test_quantity_for_foreign_product_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="not part of offer"):
            handler.handle("1", {"7": 1})

    def test_zero_quantity_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(InvalidQuantityError):
            handler.handle("1", {"1": 0})
        assert order_repo.list_all() == []

    def test_stock_checked(self):
        handler, order_repo = _setup()
        with pytest.raises(InsufficientStockError, match="Smartphone"):
            handler.handle("1", {"2": 3})
        assert order_repo.list_all() == []
