"""Category entity, referenced by products for display."""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.exceptions import ValidationError


@dataclass
class Category:
    id: str | None
    name: str

    @staticmethod
    def create(name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        return Category(id=None, name=name.strip())
