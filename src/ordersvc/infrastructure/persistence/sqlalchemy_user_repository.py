"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ordersvc.domain.model.user import User
from ordersvc.domain.repository.user_repository import UserRepository
from ordersvc.infrastructure.persistence.records import UserRecord, new_id


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str) -> User | None:
        record = self._session.get(UserRecord, user_id)
        return self._to_domain(record) if record is not None else None

    def get_many(self, user_ids: list[str]) -> dict[str, User]:
        if not user_ids:
            return {}
        records = self._session.scalars(select(UserRecord).where(UserRecord.id.in_(user_ids)))
        return {r.id: self._to_domain(r) for r in records}

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = new_id()
        record = self._session.get(UserRecord, user.id)
        if record is None:
            record = UserRecord(id=user.id)
            self._session.add(record)
        record.name = user.name
        record.email = user.email
        self._session.flush()

    @staticmethod
    def _to_domain(record: UserRecord) -> User:
        return User(id=record.id, name=record.name, email=record.email)
