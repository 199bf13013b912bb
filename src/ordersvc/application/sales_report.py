"""Application service: reporting queries over all orders."""

from __future__ import annotations

from ordersvc.domain.repository.unit_of_work import UnitOfWork


class TotalSalesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> str:
        """Sum of every order's total price; "0.00" when there are none."""
        with self._uow as uow:
            return str(uow.orders.total_sales())


class OrderCountHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> int:
        with self._uow as uow:
            return uow.orders.count()
