"""A tiny document store: one JSON file per collection.

Each collection is a JSON array of objects, every object carrying an
``id`` key.  The whole file is read on every query and rewritten on every
save, which is fine for a single-operator tool.  There are no
transactions and no locking.
"""

from __future__ import annotations

import json
import logging
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Callable, TypeVar

from pms.domain.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)

Document = dict[str, Any]
T = TypeVar("T")

# What a well-formed JSON document with the wrong shape or values raises
# while being read or converted.
MALFORMED_DOCUMENT_ERRORS = (
    KeyError,
    TypeError,
    ValueError,
    AttributeError,
    InvalidOperation,
    ValidationError,
)


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def name(self) -> str:
        return self._file_path.stem

    # --- Queries ---------------------------------------------------------------

    def find(self, predicate: Callable[[Document], bool] | None = None) -> list[Document]:
        """Return every document, or only those matching ``predicate``."""
        docs = self._load_raw()
        if predicate is None:
            return docs
        try:
            return [doc for doc in docs if predicate(doc)]
        except MALFORMED_DOCUMENT_ERRORS as exc:
            raise self._malformed(exc) from exc

    def find_by_id(self, doc_id: Any) -> Document | None:
        for doc in self._load_raw():
            if doc.get("id") == doc_id:
                return doc
        return None

    def next_id(self) -> int:
        docs = self._load_raw()
        if not docs:
            return 1
        try:
            return max(int(doc["id"]) for doc in docs) + 1
        except MALFORMED_DOCUMENT_ERRORS as exc:
            raise self._malformed(exc) from exc

    def decode(self, document: Document, to_domain: Callable[[Document], T]) -> T:
        """Convert a stored document, reporting a bad one as StoreError."""
        try:
            return to_domain(document)
        except MALFORMED_DOCUMENT_ERRORS as exc:
            raise self._malformed(exc, document.get("id")) from exc

    def decode_all(
        self,
        to_domain: Callable[[Document], T],
        predicate: Callable[[Document], bool] | None = None,
    ) -> list[T]:
        return [self.decode(doc, to_domain) for doc in self.find(predicate)]

    # --- Writes ----------------------------------------------------------------

    def save(self, document: Document) -> None:
        """Upsert: replace the document with the same id, otherwise append."""
        if document.get("id") is None:
            raise StoreError(f"Cannot save a document without an id to '{self.name}'")

        docs = self._load_raw()
        for i, raw in enumerate(docs):
            if raw.get("id") == document["id"]:
                docs[i] = document
                break
        else:
            docs.append(document)
        self._persist_raw(docs)
        logger.debug("Saved %s #%s", self.name, document["id"])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[Document]:
        try:
            docs = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            raise StoreError(f"Could not read {self._file_path}: {exc}") from exc
        if not isinstance(docs, list) or not all(isinstance(d, dict) for d in docs):
            raise StoreError(f"{self._file_path} does not contain a JSON array of objects")
        return docs

    def _malformed(self, exc: Exception, doc_id: Any = None) -> StoreError:
        where = f"document #{doc_id} in {self._file_path}" if doc_id is not None else str(self._file_path)
        logger.error("Malformed %s: %r", where, exc)
        return StoreError(f"Malformed {where}: {exc!r}")

    def _persist_raw(self, docs: list[Document]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(docs, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise StoreError(f"Could not write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Could not create {self._file_path}: {exc}") from exc
