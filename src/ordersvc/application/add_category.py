"""Application service: Add Category use case."""

from __future__ import annotations

from ordersvc.domain.model.category import Category
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class AddCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str) -> Category:
        with self._uow as uow:
            category = Category.create(name)
            uow.categories.save(category)
            uow.commit()
        return category
