"""Domain service: Stock Decrement.

Placing an order draws the ordered quantities out of catalog stock. The
service lives in the domain layer because "an order consumes stock" is a
business rule, while the atomicity of each subtraction is delegated to
the repository.
"""

from __future__ import annotations

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.order import Order
from ordersvc.domain.repository.product_repository import ProductRepository


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def decrement_for_order(self, order: Order) -> None:
        """Subtract every item's quantity from its product's stock.

        Quantities of items that name the same product are summed so each
        product is touched once. Stock is not checked for sufficiency; an
        oversold product ends up with a negative count.
        """
        quantities: dict[str, int] = {}
        for item in order.items:
            quantities[item.product_id] = (
                quantities.get(item.product_id, 0) + item.quantity.value
            )

        known = self._product_repo.get_many(list(quantities))
        for product_id in quantities:
            if product_id not in known:
                raise ValidationError(f"Product with ID {product_id} not found")

        for product_id, qty in quantities.items():
            self._product_repo.decrement_stock(product_id, qty)
