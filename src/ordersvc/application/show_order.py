"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderDetailDTO
from ordersvc.application.order_views import to_detail_dtos
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> OrderDetailDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")
            return to_detail_dtos([order], uow)[0]
