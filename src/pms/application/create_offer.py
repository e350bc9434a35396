"""Application service: Create Offer use case.

Groups existing products into a bundle sold at a fixed price.  The
bundle price is whatever the operator sets; it is not derived from the
member products' prices.
"""

from __future__ import annotations

import logging

from pms.domain.exceptions import ProductNotFoundError
from pms.domain.model.offer import Offer
from pms.domain.model.value_objects import Money
from pms.domain.repository.offer_repository import OfferRepository
from pms.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOfferHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._offer_repo = offer_repo
        self._product_repo = product_repo

    def handle(
        self,
        product_ids: list[str],
        price: str,
        name: str | None = None,
        active: bool = True,
    ) -> Offer:
        offer = Offer.create(
            product_ids=product_ids,
            price=Money.of(price),
            name=name,
            active=active,
        )

        for product_id in offer.product_ids:
            if self._product_repo.get_by_id(product_id) is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")

        self._offer_repo.save(offer)
        logger.info(
            "Offer #%s created with %d product(s) at %s",
            offer.id, len(offer.product_ids), offer.price,
        )
        return offer
