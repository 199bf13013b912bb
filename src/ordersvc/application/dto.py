"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world. Money travels as
a string with two decimals, e.g. "170.00".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


# --- Input --------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderCommand:
    """Input: everything needed to place an order."""

    items: list[OrderItemSpec]
    shipping_address1: str
    city: str
    zip: str
    country: str
    phone: str
    status: str
    user_id: str
    shipping_address2: str | None = None


# --- Output -------------------------------------------------------------------


@dataclass(frozen=True)
class UserRefDTO:
    id: str
    name: str


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    count_in_stock: int
    category: CategoryDTO | None = None


@dataclass(frozen=True)
class OrderItemDetailDTO:
    """Output: an order item with its product (and category) expanded."""

    id: str
    quantity: int
    product: ProductDTO | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as stored, items and user given by ID."""

    id: str
    order_items: list[str]
    shipping_address1: str
    shipping_address2: str | None
    city: str
    zip: str
    country: str
    phone: str
    status: str
    total_price: str
    user: str
    date_ordered: datetime


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: an order in a listing, with the user's name resolved."""

    id: str
    order_items: list[str]
    shipping_address1: str
    shipping_address2: str | None
    city: str
    zip: str
    country: str
    phone: str
    status: str
    total_price: str
    user: UserRefDTO | None
    date_ordered: datetime


@dataclass(frozen=True)
class OrderDetailDTO:
    """Output: an order with user, items, products and categories expanded."""

    id: str
    shipping_address1: str
    shipping_address2: str | None
    city: str
    zip: str
    country: str
    phone: str
    status: str
    total_price: str
    user: UserRefDTO | None
    date_ordered: datetime
    order_items: list[OrderItemDetailDTO] = field(default_factory=list)
