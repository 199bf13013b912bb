"""Abstract repository for Category entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_many(self, category_ids: list[str]) -> dict[str, Category]:
        """Return the categories that exist among *category_ids*, keyed by ID."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category, assigning an ID if needed."""
