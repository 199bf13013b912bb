"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.product_repository import ProductRepository
from ordersvc.infrastructure.persistence.records import ProductRecord, new_id


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        record = self._session.get(ProductRecord, product_id)
        return self._to_domain(record) if record is not None else None

    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        if not product_ids:
            return {}
        records = self._session.scalars(
            select(ProductRecord).where(ProductRecord.id.in_(product_ids))
        )
        return {r.id: self._to_domain(r) for r in records}

    def list_all(self) -> list[Product]:
        records = self._session.scalars(select(ProductRecord).order_by(ProductRecord.name))
        return [self._to_domain(r) for r in records]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = new_id()
        record = self._session.get(ProductRecord, product.id)
        if record is None:
            record = ProductRecord(id=product.id)
            self._session.add(record)
        record.name = product.name
        record.price_cents = product.price.cents
        record.currency = product.price.currency
        record.count_in_stock = product.count_in_stock
        record.category_id = product.category_id
        self._session.flush()

    def decrement_stock(self, product_id: str, quantity: int) -> None:
        # Single UPDATE: the database applies the subtraction, so two
        # concurrent orders cannot both read the same starting count.
        self._session.execute(
            update(ProductRecord)
            .where(ProductRecord.id == product_id)
            .values(count_in_stock=ProductRecord.count_in_stock - quantity)
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            price=Money.from_cents(record.price_cents, record.currency),
            count_in_stock=record.count_in_stock,
            category_id=record.category_id,
        )
