"""Abstract repository for Offer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from pms.domain.model.offer import Offer


class OfferRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique offer ID."""

    @abstractmethod
    def get_by_id(self, offer_id: str) -> Offer | None:
        """Return an offer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Offer]:
        """Return every offer, active or not."""

    @abstractmethod
    def list_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Offer]:
        """Return offers whose bundle price lies in [min_price, max_price]."""

    @abstractmethod
    def list_containing_product(self, product_id: str) -> list[Offer]:
        """Return offers that embed the given product."""

    @abstractmethod
    def save(self, offer: Offer) -> None:
        """Persist a new or updated offer, assigning an ID if needed."""
