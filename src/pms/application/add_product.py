"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pms.domain.exceptions import CategoryNotFoundError, SupplierNotFoundError
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._supplier_repo = supplier_repo

    def handle(
        self,
        name: str,
        category_id: str,
        price: str,
        cost: str,
        stock: int,
        supplier_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        The category must exist; the supplier is optional but must exist
        when given.
        """
        if self._category_repo.get_by_id(category_id) is None:
            raise CategoryNotFoundError(f"Category #{category_id} not found")
        if supplier_id and self._supplier_repo.get_by_id(supplier_id) is None:
            raise SupplierNotFoundError(f"Supplier #{supplier_id} not found")

        product = Product.create(
            name=name,
            category_id=category_id,
            price=Money.of(price),
            cost=Money.of(cost),
            stock=stock,
            supplier_id=supplier_id,
        )
        self._product_repo.save(product)
        logger.info(
            "Product #%s '%s' added (price=%s, cost=%s, stock=%d)",
            product.id, product.name, product.price, product.cost, product.stock,
        )
        return product
