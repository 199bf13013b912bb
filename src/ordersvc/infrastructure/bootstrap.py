"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from sqlalchemy import Engine

from ordersvc.application.notifier import Notifier
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.infrastructure.config import Settings
from ordersvc.infrastructure.mail.smtp_notifier import LogNotifier, SmtpNotifier
from ordersvc.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
)
from ordersvc.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=None)
def engine(database_url: str) -> Engine:
    """One engine (and connection pool) per database URL per process."""
    return build_engine(database_url)


def unit_of_work_factory(config: Settings) -> Callable[[], UnitOfWork]:
    session_factory = build_session_factory(engine(config.database_url))
    return lambda: SqlAlchemyUnitOfWork(session_factory)


def unit_of_work(config: Settings) -> UnitOfWork:
    return unit_of_work_factory(config)()


def notifier(config: Settings) -> Notifier:
    if config.smtp_host:
        return SmtpNotifier(config)
    return LogNotifier()
