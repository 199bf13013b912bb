"""Unit of work: one transactional scope per request.

Handlers enter the unit of work, reach repositories through it, and call
``commit()`` once every write of the request has been issued. Leaving the
block without committing discards the writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.repository.category_repository import CategoryRepository
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_repository import ProductRepository
from ordersvc.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    orders: OrderRepository
    products: ProductRepository
    categories: CategoryRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write issued in this scope durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard writes not yet committed."""
