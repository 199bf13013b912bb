"""Product aggregate.

Products live independently of orders. Orders read their price at
creation time and draw down ``count_in_stock``; everything else about a
product belongs to the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``count_in_stock`` has no lower bound: orders are accepted regardless
    of stock, so the count goes negative when the shop oversells.
    """

    id: str | None
    name: str
    price: Money
    count_in_stock: int = 0
    category_id: str | None = None

    @staticmethod
    def create(
        name: str,
        price: Money,
        count_in_stock: int = 0,
        category_id: str | None = None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if count_in_stock < 0:
            raise ValidationError("Initial stock cannot be negative")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            count_in_stock=count_in_stock,
            category_id=category_id,
        )
