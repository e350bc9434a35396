"""Application service: List Products use case (query)."""

from __future__ import annotations

from pms.application.catalog_lookup import CatalogLookup
from pms.application.dto import ProductDTO
from pms.domain.exceptions import CategoryNotFoundError, SupplierNotFoundError, ValidationError
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._supplier_repo = supplier_repo
        self._lookup = CatalogLookup(product_repo, category_repo, supplier_repo)

    def handle(
        self,
        category_id: str | None = None,
        supplier_id: str | None = None,
    ) -> list[ProductDTO]:
        """List products, optionally restricted to one category or supplier."""
        if category_id and supplier_id:
            raise ValidationError("Filter by category or by supplier, not both")

        if category_id:
            if self._category_repo.get_by_id(category_id) is None:
                raise CategoryNotFoundError(f"Category #{category_id} not found")
            products = self._product_repo.list_by_category(category_id)
        elif supplier_id:
            if self._supplier_repo.get_by_id(supplier_id) is None:
                raise SupplierNotFoundError(f"Supplier #{supplier_id} not found")
            products = self._product_repo.list_by_supplier(supplier_id)
        else:
            products = self._product_repo.list_all()

        return [self._lookup.product_dto(p) for p in products]
