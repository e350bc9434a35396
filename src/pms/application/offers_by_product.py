"""Application service: Offers containing a product (query).

For margin inspection: every offer that embeds the product, its member
products' current cost and price, and the offer's total net cost (sum of
member costs, one unit each) next to its bundle price.
"""

from __future__ import annotations

from pms.application.catalog_lookup import CatalogLookup
from pms.application.dto import OfferMarginDTO
from pms.domain.exceptions import ProductNotFoundError
from pms.domain.model.value_objects import Money
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class OffersByProductHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._offer_repo = offer_repo
        self._product_repo = product_repo
        self._lookup = CatalogLookup(product_repo, category_repo, supplier_repo)

    def handle(self, product_id: str) -> list[OfferMarginDTO]:
        if self._product_repo.get_by_id(product_id) is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")

        result: list[OfferMarginDTO] = []
        for offer in self._offer_repo.list_containing_product(product_id):
            members = self._lookup.offer_members(offer)
            net = Money.total(p.cost for p in members)
            result.append(
                OfferMarginDTO(
                    offer_id=offer.id,  # type: ignore[arg-type]
                    label=offer.label,
                    price=str(offer.price),
                    products=[self._lookup.offer_product_dto(p) for p in members],
                    total_net_cost=str(net),
                )
            )
        return result
