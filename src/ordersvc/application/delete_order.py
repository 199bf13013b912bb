"""Application service: Delete Order use case.

The order and every item it owns are removed in the same unit of work.
Stock drawn down by the order is not given back.
"""

from __future__ import annotations

import structlog

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> None:
        with self._uow as uow:
            order = uow.orders.delete(order_id)
            if order is None:
                raise EntityNotFoundError("order not found!")
            uow.commit()

        logger.info("Order deleted", order_id=order_id, items=len(order.items))
