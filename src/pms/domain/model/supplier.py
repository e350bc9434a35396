"""Supplier aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from pms.domain.exceptions import ValidationError


@dataclass
class Supplier:
    """Someone products are bought from.

    ``contact`` is free text describing who to reach, e.g.
    ``"Jane Smith (jane@example.com)"``.
    """

    id: str | None
    name: str
    contact: str = ""
    description: str | None = None

    @staticmethod
    def create(
        name: str,
        contact: str = "",
        description: str | None = None,
    ) -> Supplier:
        if not name or not name.strip():
            raise ValidationError("Supplier name is required")
        description = description.strip() if description else None
        return Supplier(
            id=None,
            name=name.strip(),
            contact=(contact or "").strip(),
            description=description or None,
        )
