"""Application service: List Products use case (query)."""

from __future__ import annotations

from ordersvc.domain.model.product import Product
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Product]:
        with self._uow as uow:
            return uow.products.list_all()
