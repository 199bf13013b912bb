"""In-memory fakes for testing.

These implement the same abstract interfaces as the SQLAlchemy
repositories but keep everything in a dict. No database, no side effects.
"""

from __future__ import annotations

from dataclasses import replace
from itertools import count

from ordersvc.application.notifier import Notifier
from ordersvc.domain.exceptions import NotificationError
from ordersvc.domain.model.category import Category
from ordersvc.domain.model.order import Order, OrderItem
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.user import User
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.category_repository import CategoryRepository
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_repository import ProductRepository
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.domain.repository.user_repository import UserRepository

_ids = count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids)}"


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def add(self, order: Order) -> None:
        if order.id is None:
            order.id = _next_id("order")
        order.items = [
            item if item.id is not None else replace(item, id=_next_id("item"))
            for item in order.items
        ]
        self._store[order.id] = order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def get_item_by_id(self, item_id: str) -> OrderItem | None:
        for order in self._store.values():
            for item in order.items:
                if item.id == item_id:
                    return item
        return None

    def list_all(self) -> list[Order]:
        return sorted(self._store.values(), key=lambda o: o.date_ordered, reverse=True)

    def list_by_user(self, user_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def save(self, order: Order) -> None:
        self._store[order.id] = order

    def delete(self, order_id: str) -> Order | None:
        return self._store.pop(order_id, None)

    def count(self) -> int:
        return len(self._store)

    def total_sales(self) -> Money:
        return Money.total(o.total_price for o in self._store.values())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        return {pid: self._store[pid] for pid in product_ids if pid in self._store}

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = _next_id("product")
        self._store[product.id] = product

    def decrement_stock(self, product_id: str, quantity: int) -> None:
        self._store[product_id].count_in_stock -= quantity


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[str, Category] = {c.id: c for c in categories or []}

    def get_many(self, category_ids: list[str]) -> dict[str, Category]:
        return {cid: self._store[cid] for cid in category_ids if cid in self._store}

    def save(self, category: Category) -> None:
        if category.id is None:
            category.id = _next_id("category")
        self._store[category.id] = category


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {u.id: u for u in users or []}

    def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    def get_many(self, user_ids: list[str]) -> dict[str, User]:
        return {uid: self._store[uid] for uid in user_ids if uid in self._store}

    def save(self, user: User) -> None:
        if user.id is None:
            user.id = _next_id("user")
        self._store[user.id] = user


class FakeUnitOfWork(UnitOfWork):
    """Shares one set of fake repositories across every scope.

    Writes are applied immediately; ``commits`` counts how often a handler
    declared its work complete.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        categories: list[Category] | None = None,
        users: list[User] | None = None,
    ) -> None:
        self.orders = FakeOrderRepository()
        self.products = FakeProductRepository(products)
        self.categories = FakeCategoryRepository(categories)
        self.users = FakeUserRepository(users)
        self.commits = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        pass


class FakeNotifier(Notifier):
    """Records messages in memory for test assertions."""

    def __init__(self, should_succeed: bool = True) -> None:
        self.sent: list[dict] = []
        self.should_succeed = should_succeed

    def send(self, to: str, subject: str, body: str) -> None:
        if not self.should_succeed:
            raise NotificationError("Email delivery failed")
        self.sent.append({"to": to, "subject": subject, "body": body})
