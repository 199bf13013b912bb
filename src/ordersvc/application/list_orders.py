"""Application service: List Orders use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderSummaryDTO
from ordersvc.application.order_views import to_summary_dtos
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderSummaryDTO]:
        """Every order, newest first, with the owning user's name."""
        with self._uow as uow:
            return to_summary_dtos(uow.orders.list_all(), uow)
