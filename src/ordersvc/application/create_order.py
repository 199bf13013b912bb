"""Application service: Create Order use case.

Orchestrates catalog lookups, order persistence, stock decrement and the
confirmation email. The writes share one unit of work: either the order,
its items and every stock decrement are committed together, or none are.
"""

from __future__ import annotations

import structlog

from ordersvc.application.confirmation import render_confirmation
from ordersvc.application.dto import CreateOrderCommand, OrderDTO
from ordersvc.application.notifier import Notifier
from ordersvc.application.order_views import to_order_dto
from ordersvc.domain.exceptions import NotificationError, ValidationError
from ordersvc.domain.model.order import Order, ShippingAddress
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.user import User
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.domain.service.stock_service import StockService

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: Notifier,
        fallback_recipient: str,
        shop_name: str,
    ) -> None:
        self._uow = uow
        self._notifier = notifier
        self._fallback_recipient = fallback_recipient
        self._shop_name = shop_name

    def handle(self, command: CreateOrderCommand) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Resolve every product (fail before any write if one is missing).
        2. Let the Order aggregate validate input and compute the total.
        3. Persist the order and decrement stock, then commit.
        4. Send the confirmation email (best-effort).
        """
        if not command.items:
            raise ValidationError("Order must contain at least one item")

        with self._uow as uow:
            lines: list[tuple[Product, int]] = []
            for requested in command.items:
                product = uow.products.get_by_id(requested.product_id)
                if product is None:
                    raise ValidationError(
                        f"Product with ID {requested.product_id} not found"
                    )
                lines.append((product, requested.quantity))

            shipping = ShippingAddress.create(
                address1=command.shipping_address1,
                address2=command.shipping_address2,
                city=command.city,
                zip=command.zip,
                country=command.country,
                phone=command.phone,
            )
            order = Order.create(
                user_id=command.user_id,
                shipping=shipping,
                status=command.status,
                lines=lines,
            )

            user = uow.users.get_by_id(order.user_id)
            if user is None:
                raise ValidationError(f"User with ID {order.user_id} not found")

            uow.orders.add(order)
            StockService(uow.products).decrement_for_order(order)
            uow.commit()

        logger.info(
            "Order placed",
            order_id=order.id,
            user_id=order.user_id,
            items=len(order.items),
            total_price=str(order.total_price),
        )

        products = {product.id: product for product, _ in lines}
        self._send_confirmation(order, products, user)  # type: ignore[arg-type]
        return to_order_dto(order)

    # --- Notification ---------------------------------------------------------

    def _send_confirmation(
        self, order: Order, products: dict[str, Product], user: User
    ) -> None:
        message = render_confirmation(
            order,
            products,
            user,
            fallback_recipient=self._fallback_recipient,
            shop_name=self._shop_name,
        )
        try:
            self._notifier.send(message.to, message.subject, message.body)
        except NotificationError as exc:
            logger.error(
                "Order confirmation email failed",
                order_id=order.id,
                recipient=message.to,
                error=str(exc),
            )
