"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its items. The total price is
computed once, from catalog prices, when the order is created; later
price changes never touch existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money, Quantity


def _require(value: str | None, label: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} is required")
    return str(value).strip()


@dataclass(frozen=True)
class ShippingAddress:
    """Where and to whom the order ships. Only ``address2`` is optional."""

    address1: str
    city: str
    zip: str
    country: str
    phone: str
    address2: str | None = None

    @staticmethod
    def create(
        address1: str,
        city: str,
        zip: str,
        country: str,
        phone: str,
        address2: str | None = None,
    ) -> ShippingAddress:
        return ShippingAddress(
            address1=_require(address1, "Shipping address"),
            city=_require(city, "City"),
            zip=_require(zip, "Zip"),
            country=_require(country, "Country"),
            phone=_require(phone, "Phone"),
            address2=address2.strip() if address2 and address2.strip() else None,
        )


@dataclass(frozen=True)
class OrderItem:
    """A (product, quantity) line owned by exactly one order.

    Never mutated after creation; the repository assigns ``id`` when the
    owning order is first stored.
    """

    id: str | None
    product_id: str
    quantity: Quantity


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders: it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    user_id: str
    items: list[OrderItem]
    shipping: ShippingAddress
    status: str
    total_price: Money
    date_ordered: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        shipping: ShippingAddress,
        status: str,
        lines: list[tuple[Product, int]],
    ) -> Order:
        """Create a new order from resolved products and their quantities.

        ``total_price`` is the sum of ``price x quantity`` over the lines,
        evaluated against the prices the products carry right now.
        """
        user_id = _require(user_id, "User")
        status = _require(status, "Status")

        if not lines:
            raise ValidationError("Order must contain at least one item")

        items = [
            OrderItem(id=None, product_id=product.id, quantity=Quantity(quantity))
            for product, quantity in lines
        ]
        total = Money.total(
            product.price * item.quantity.value
            for (product, _), item in zip(lines, items)
        )

        return Order(
            id=None,
            user_id=user_id,
            items=items,
            shipping=shipping,
            status=status,
            total_price=total,
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: str) -> None:
        """Replace the status label. Any non-blank label is accepted."""
        self.status = _require(status, "Status")

    # --- Computed properties --------------------------------------------------

    @property
    def item_ids(self) -> list[str]:
        return [item.id for item in self.items if item.id is not None]

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.items]
