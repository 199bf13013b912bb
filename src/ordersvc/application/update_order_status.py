"""Application service: Update Order Status use case."""

from __future__ import annotations

import structlog

from ordersvc.application.dto import OrderDTO
from ordersvc.application.order_views import to_order_dto
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str, status: str) -> OrderDTO:
        """Change only the status of an order and return the result."""
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order {order_id} not found")

            previous = order.status
            order.update_status(status)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order status updated",
            order_id=order_id,
            previous=previous,
            status=order.status,
        )
        return to_order_dto(order)
