"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.order import Order, OrderItem
from ordersvc.domain.model.value_objects import Money


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and its items, assigning their IDs."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_item_by_id(self, item_id: str) -> OrderItem | None:
        """Return a single order item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return the orders placed by one user, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order's status."""

    @abstractmethod
    def delete(self, order_id: str) -> Order | None:
        """Remove an order together with its items.

        Returns the removed order, or None if no order had that ID.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored orders."""

    @abstractmethod
    def total_sales(self) -> Money:
        """Return the sum of every order's total price (zero when empty)."""
