"""Category aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from pms.domain.exceptions import ValidationError


@dataclass
class Category:
    """A grouping of products (e.g. "Electronics")."""

    id: str | None
    name: str
    description: str | None = None

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        description = description.strip() if description else None
        return Category(id=None, name=name.strip(), description=description or None)
