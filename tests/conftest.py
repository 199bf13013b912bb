"""Shared fixtures for tests that run against a real (in-memory) database."""

from types import SimpleNamespace

import pytest

from ordersvc.domain.model.category import Category
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.user import User
from ordersvc.domain.model.value_objects import Money
from ordersvc.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from ordersvc.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def uow_factory(engine):
    session_factory = build_session_factory(engine)
    return lambda: SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def catalog(uow_factory):
    """One category, two products and two users, committed."""
    with uow_factory() as uow:
        tools = Category.create("Tools")
        uow.categories.save(tools)

        widget = Product.create("Widget", Money.of("15.00"), 100, tools.id)
        gadget = Product.create("Gadget", Money.of("25.00"), 3)
        uow.products.save(widget)
        uow.products.save(gadget)

        alice = User.create("Alice", "alice@example.com")
        bob = User.create("Bob")
        uow.users.save(alice)
        uow.users.save(bob)
        uow.commit()

    return SimpleNamespace(tools=tools, widget=widget, gadget=gadget, alice=alice, bob=bob)
