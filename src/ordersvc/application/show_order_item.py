"""Application service: Show Order Item use case (query)."""

from __future__ import annotations

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class ShowOrderItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: str) -> str:
        """Return the ID of the product the order item refers to."""
        with self._uow as uow:
            item = uow.orders.get_item_by_id(item_id)
            if item is None:
                raise EntityNotFoundError("Order item not found")
            return item.product_id
