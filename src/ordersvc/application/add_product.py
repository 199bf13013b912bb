"""Application service: Add Product use case."""

from __future__ import annotations

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        count_in_stock: int = 0,
        category_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        with self._uow as uow:
            if category_id is not None and not uow.categories.get_many([category_id]):
                raise ValidationError(f"Category with ID {category_id} not found")

            product = Product.create(
                name=name,
                price=Money.of(price),
                count_in_stock=count_in_stock,
                category_id=category_id,
            )
            uow.products.save(product)
            uow.commit()
        return product
