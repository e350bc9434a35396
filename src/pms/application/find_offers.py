"""Application service: Find Offers use case (query).

Offers can be looked up by bundle price range or by the category of
any of their member products.
"""

from __future__ import annotations

from pms.application.catalog_lookup import CatalogLookup
from pms.application.dto import OfferDTO
from pms.domain.exceptions import CategoryNotFoundError, ValidationError
from pms.domain.model.offer import Offer
from pms.domain.model.value_objects import Money
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class FindOffersHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._offer_repo = offer_repo
        self._category_repo = category_repo
        self._lookup = CatalogLookup(product_repo, category_repo, supplier_repo)

    def all(self) -> list[OfferDTO]:
        return [self._to_dto(o) for o in self._offer_repo.list_all()]

    def in_price_range(self, min_price: str, max_price: str) -> list[OfferDTO]:
        """Offers whose bundle price is between the bounds, inclusive."""
        low = Money.of(min_price).amount
        high = Money.of(max_price).amount
        if low > high:
            raise ValidationError(
                f"Minimum price {low} is greater than maximum price {high}"
            )
        return [self._to_dto(o) for o in self._offer_repo.list_by_price_range(low, high)]

    def in_category(self, category_id: str) -> list[OfferDTO]:
        """Offers with at least one member product in the category."""
        if self._category_repo.get_by_id(category_id) is None:
            raise CategoryNotFoundError(f"Category #{category_id} not found")

        result: list[OfferDTO] = []
        for offer in self._offer_repo.list_all():
            members = self._lookup.offer_members(offer)
            if any(p.category_id == category_id for p in members):
                result.append(self._to_dto(offer))
        return result

    def _to_dto(self, offer: Offer) -> OfferDTO:
        return OfferDTO(
            id=offer.id,  # type: ignore[arg-type]
            label=offer.label,
            price=str(offer.price),
            active=offer.active,
            products=[
                self._lookup.offer_product_dto(p)
                for p in self._lookup.offer_members(offer)
            ],
        )
