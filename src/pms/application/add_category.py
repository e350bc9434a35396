"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from pms.domain.exceptions import ValidationError
from pms.domain.model.category import Category
from pms.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str | None = None) -> Category:
        """Add a new category.  Names are unique, ignoring case."""
        category = Category.create(name=name, description=description)

        if self._category_repo.get_by_name(category.name) is not None:
            raise ValidationError(f"Category '{category.name}' already exists")

        self._category_repo.save(category)
        logger.info("Category #%s '%s' added", category.id, category.name)
        return category
