"""Application service: List User Orders use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderDetailDTO
from ordersvc.application.order_views import to_detail_dtos
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class ListUserOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> list[OrderDetailDTO]:
        """A user's orders, newest first, fully expanded.

        An unknown user simply has no orders.
        """
        with self._uow as uow:
            return to_detail_dtos(uow.orders.list_by_user(user_id), uow)
