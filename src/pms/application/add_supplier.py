"""Application service: Add Supplier use case."""

from __future__ import annotations

import logging

from pms.domain.model.supplier import Supplier
from pms.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class AddSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        name: str,
        contact: str = "",
        description: str | None = None,
    ) -> Supplier:
        supplier = Supplier.create(name=name, contact=contact, description=description)
        self._supplier_repo.save(supplier)
        logger.info("Supplier #%s '%s' added", supplier.id, supplier.name)
        return supplier
