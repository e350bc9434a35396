"""Referential lookups shared by the catalog and offer queries.

Products store only the IDs of their category and supplier; offers
store only product IDs.  This helper joins them back together for
display, the way a document store would populate references.
"""

from __future__ import annotations

from pms.application.dto import OfferProductDTO, ProductDTO
from pms.domain.model.offer import Offer
from pms.domain.model.product import Product
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class CatalogLookup:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._supplier_repo = supplier_repo

    def category_name(self, category_id: str | None) -> str | None:
        if not category_id:
            return None
        category = self._category_repo.get_by_id(category_id)
        return category.name if category else None

    def supplier_name(self, supplier_id: str | None) -> str | None:
        if not supplier_id:
            return None
        supplier = self._supplier_repo.get_by_id(supplier_id)
        return supplier.name if supplier else None

    def offer_members(self, offer: Offer) -> list[Product]:
        """Resolve an offer's product IDs, dropping any that no longer exist."""
        members: list[Product] = []
        for product_id in offer.product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is not None:
                members.append(product)
        return members

    def product_dto(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            category_name=self.category_name(product.category_id),
            supplier_name=self.supplier_name(product.supplier_id),
            price=str(product.price),
            cost=str(product.cost),
            stock=product.stock,
        )

    def offer_product_dto(self, product: Product) -> OfferProductDTO:
        return OfferProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=str(product.price),
            cost=str(product.cost),
            stock=product.stock,
            category_name=self.category_name(product.category_id),
            supplier_name=self.supplier_name(product.supplier_id),
        )
