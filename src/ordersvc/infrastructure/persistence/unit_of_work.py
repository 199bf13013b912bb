"""SQLAlchemy implementation of UnitOfWork: one session per scope."""

from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ordersvc.domain.exceptions import StorageError
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.infrastructure.persistence.sqlalchemy_category_repository import (
    SqlAlchemyCategoryRepository,
)
from ordersvc.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from ordersvc.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from ordersvc.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Opens a session on enter; rolls back and closes it on exit.

    Any ``SQLAlchemyError`` escaping the block is re-raised as
    ``StorageError`` so callers above the infrastructure layer never
    see driver exceptions.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.orders = SqlAlchemyOrderRepository(self._session)
        self.products = SqlAlchemyProductRepository(self._session)
        self.categories = SqlAlchemyCategoryRepository(self._session)
        self.users = SqlAlchemyUserRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            if self._session is not None:
                self._session.close()
            self._session = None
        if isinstance(exc, SQLAlchemyError):
            logger.error("Storage failure", error=str(exc))
            raise StorageError(str(exc)) from exc

    def commit(self) -> None:
        self._require_session().commit()

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()

    def _require_session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work used outside a 'with' block")
        return self._session
