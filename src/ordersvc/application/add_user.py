"""Application service: Add User use case.

Users normally come from the account system; this exists so a fresh
database can be seeded from the command line.
"""

from __future__ import annotations

from ordersvc.domain.model.user import User
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class AddUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, email: str | None = None) -> User:
        with self._uow as uow:
            user = User.create(name, email)
            uow.users.save(user)
            uow.commit()
        return user
