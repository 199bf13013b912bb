"""SQLAlchemy-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ordersvc.domain.model.category import Category
from ordersvc.domain.repository.category_repository import CategoryRepository
from ordersvc.infrastructure.persistence.records import CategoryRecord, new_id


class SqlAlchemyCategoryRepository(CategoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_many(self, category_ids: list[str]) -> dict[str, Category]:
        if not category_ids:
            return {}
        records = self._session.scalars(
            select(CategoryRecord).where(CategoryRecord.id.in_(category_ids))
        )
        return {r.id: Category(id=r.id, name=r.name) for r in records}

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = new_id()
        record = self._session.get(CategoryRecord, category.id)
        if record is None:
            record = CategoryRecord(id=category.id)
            self._session.add(record)
        record.name = category.name
        self._session.flush()
