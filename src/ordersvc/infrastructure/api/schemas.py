"""Pydantic request/response schemas for the Orders API.

These are external contracts (anti-corruption layer): separate from the
application DTOs. JSON field names are camelCase; Python attributes stay
snake_case.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from ordersvc.domain.model.value_objects import MAX_QUANTITY


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class OrderItemRequest(ApiModel):
    product: str = Field(min_length=1)
    quantity: StrictInt = Field(ge=1, le=MAX_QUANTITY)


class CreateOrderRequest(ApiModel):
    order_items: list[OrderItemRequest] = Field(min_length=1)
    shipping_address1: str = Field(min_length=1)
    shipping_address2: str | None = None
    city: str = Field(min_length=1)
    zip: str = Field(min_length=1)
    country: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    status: str = Field(min_length=1)
    user: str = Field(min_length=1)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "orderItems": [{"product": "5f1c0d3a9b0e4e0f8a1b2c3d", "quantity": 2}],
                    "shippingAddress1": "123 Main St",
                    "shippingAddress2": "Apt 4",
                    "city": "Springfield",
                    "zip": "62701",
                    "country": "US",
                    "phone": "+1 555 0100",
                    "status": "pending",
                    "user": "8c2b7e1f0a6d4c3b9e5f1a2b3c4d5e6f",
                }
            ]
        },
    )


class UpdateStatusRequest(ApiModel):
    status: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class UserRefSchema(ApiModel):
    id: str
    name: str


class CategorySchema(ApiModel):
    id: str
    name: str


class ProductSchema(ApiModel):
    id: str
    name: str
    price: str
    count_in_stock: int
    category: CategorySchema | None = None


class OrderItemDetailSchema(ApiModel):
    id: str
    quantity: int
    product: ProductSchema | None


class _OrderBase(ApiModel):
    id: str
    shipping_address1: str
    shipping_address2: str | None = None
    city: str
    zip: str
    country: str
    phone: str
    status: str
    total_price: str
    date_ordered: datetime


class OrderSchema(_OrderBase):
    order_items: list[str]
    user: str


class OrderSummarySchema(_OrderBase):
    order_items: list[str]
    user: UserRefSchema | None


class OrderDetailSchema(_OrderBase):
    order_items: list[OrderItemDetailSchema]
    user: UserRefSchema | None


class OrderItemProductResponse(BaseModel):
    success: bool = True
    product: str


class DeleteOrderResponse(BaseModel):
    success: bool = True
    message: str = "the order is deleted!"


class TotalSalesResponse(BaseModel):
    totalsales: str


class OrderCountResponse(ApiModel):
    order_count: int


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
