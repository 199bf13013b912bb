"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import timezone

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from ordersvc.domain.model.order import Order, OrderItem, ShippingAddress
from ordersvc.domain.model.value_objects import Money, Quantity
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.infrastructure.persistence.records import (
    OrderItemRecord,
    OrderRecord,
    new_id,
)


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        if order.id is None:
            order.id = new_id()
        order.items = [
            item if item.id is not None else replace(item, id=new_id())
            for item in order.items
        ]
        self._session.add(self._to_record(order))
        self._session.flush()

    def get_by_id(self, order_id: str) -> Order | None:
        record = self._load(order_id)
        return self._to_domain(record) if record is not None else None

    def get_item_by_id(self, item_id: str) -> OrderItem | None:
        record = self._session.get(OrderItemRecord, item_id)
        return self._item_to_domain(record) if record is not None else None

    def list_all(self) -> list[Order]:
        return self._list(self._newest_first())

    def list_by_user(self, user_id: str) -> list[Order]:
        return self._list(self._newest_first().where(OrderRecord.user_id == user_id))

    def save(self, order: Order) -> None:
        record = self._session.get(OrderRecord, order.id)
        if record is None:
            self.add(order)
            return
        record.status = order.status
        self._session.flush()

    def delete(self, order_id: str) -> Order | None:
        record = self._load(order_id)
        if record is None:
            return None
        order = self._to_domain(record)
        # Items go with the order through the delete-orphan cascade
        self._session.delete(record)
        self._session.flush()
        return order

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(OrderRecord)) or 0

    def total_sales(self) -> Money:
        cents = self._session.scalar(select(func.sum(OrderRecord.total_cents)))
        return Money.from_cents(cents or 0)

    # --- Queries --------------------------------------------------------------

    def _load(self, order_id: str) -> OrderRecord | None:
        return self._session.scalar(
            select(OrderRecord)
            .options(selectinload(OrderRecord.items))
            .where(OrderRecord.id == order_id)
        )

    @staticmethod
    def _newest_first():
        return (
            select(OrderRecord)
            .options(selectinload(OrderRecord.items))
            .order_by(OrderRecord.date_ordered.desc())
        )

    def _list(self, stmt) -> list[Order]:
        return [self._to_domain(r) for r in self._session.scalars(stmt).all()]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_record(order: Order) -> OrderRecord:
        return OrderRecord(
            id=order.id,
            user_id=order.user_id,
            shipping_address1=order.shipping.address1,
            shipping_address2=order.shipping.address2,
            city=order.shipping.city,
            zip=order.shipping.zip,
            country=order.shipping.country,
            phone=order.shipping.phone,
            status=order.status,
            total_cents=order.total_price.cents,
            currency=order.total_price.currency,
            date_ordered=order.date_ordered,
            items=[
                OrderItemRecord(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    position=position,
                )
                for position, item in enumerate(order.items)
            ],
        )

    @classmethod
    def _to_domain(cls, record: OrderRecord) -> Order:
        date_ordered = record.date_ordered
        # SQLite drops the offset; stored values are always UTC
        if date_ordered.tzinfo is None:
            date_ordered = date_ordered.replace(tzinfo=timezone.utc)
        return Order(
            id=record.id,
            user_id=record.user_id,
            items=[cls._item_to_domain(i) for i in record.items],
            shipping=ShippingAddress(
                address1=record.shipping_address1,
                address2=record.shipping_address2,
                city=record.city,
                zip=record.zip,
                country=record.country,
                phone=record.phone,
            ),
            status=record.status,
            total_price=Money.from_cents(record.total_cents, record.currency),
            date_ordered=date_ordered,
        )

    @staticmethod
    def _item_to_domain(record: OrderItemRecord) -> OrderItem:
        return OrderItem(
            id=record.id,
            product_id=record.product_id,
            quantity=Quantity(record.quantity),
        )
