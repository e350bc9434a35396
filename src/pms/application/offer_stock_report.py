"""Application service: Offer Stock Availability report (query).

Each offer is put in exactly one bucket according to the fraction of
its member products that currently have stock > 0:

* all in stock:  100%
* some in stock: more than 0% and less than 100%
* none in stock: 0% (including offers whose products no longer exist)
"""

from __future__ import annotations

from pms.application.catalog_lookup import CatalogLookup
from pms.application.dto import OfferAvailabilityDTO, StockAvailabilityReportDTO
from pms.domain.model.offer import StockAvailability, classify_availability
from pms.domain.repository.category_repository import CategoryRepository
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.repository.supplier_repository import SupplierRepository


class OfferStockReportHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._offer_repo = offer_repo
        self._lookup = CatalogLookup(product_repo, category_repo, supplier_repo)

    def handle(self) -> StockAvailabilityReportDTO:
        counts = {bucket: 0 for bucket in StockAvailability}
        rows: list[OfferAvailabilityDTO] = []

        for offer in self._offer_repo.list_all():
            members = self._lookup.offer_members(offer)
            bucket = classify_availability(members)
            counts[bucket] += 1
            rows.append(
                OfferAvailabilityDTO(
                    offer_id=offer.id,  # type: ignore[arg-type]
                    label=offer.label,
                    availability=bucket.value,
                    in_stock_count=sum(1 for p in members if p.in_stock),
                    product_count=len(members),
                )
            )

        return StockAvailabilityReportDTO(
            all_in_stock=counts[StockAvailability.ALL_IN_STOCK],
            some_in_stock=counts[StockAvailability.SOME_IN_STOCK],
            none_in_stock=counts[StockAvailability.NONE_IN_STOCK],
            offers=rows,
        )
