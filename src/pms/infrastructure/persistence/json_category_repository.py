"""JSON-document implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from pms.domain.model.category import Category
from pms.domain.repository.category_repository import CategoryRepository
from pms.infrastructure.persistence.json_document_store import Document, JsonCollection


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- CategoryRepository interface -----------------------------------------

    def next_id(self) -> str:
        return str(self._collection.next_id())

    def get_by_id(self, category_id: str) -> Category | None:
        raw = self._collection.find_by_id(category_id)
        return self._collection.decode(raw, self._to_domain) if raw is not None else None

    def get_by_name(self, name: str) -> Category | None:
        matches = self._collection.decode_all(
            self._to_domain, lambda d: d["name"].lower() == name.lower()
        )
        return matches[0] if matches else None

    def list_all(self) -> list[Category]:
        return self._collection.decode_all(self._to_domain)

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = self.next_id()
        self._collection.save(self._to_raw(category))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> Document:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
        }

    @staticmethod
    def _to_domain(raw: Document) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description"),
        )
