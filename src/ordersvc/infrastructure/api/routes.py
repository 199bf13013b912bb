"""FastAPI routes for orders.

Route functions are plain ``def``: FastAPI runs them in its worker
threadpool, each with a fresh unit of work. Domain exceptions propagate
to the handlers registered in ``ordersvc.infrastructure.api.app``.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status

from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.delete_order import DeleteOrderHandler
from ordersvc.application.dto import CreateOrderCommand, OrderItemSpec
from ordersvc.application.list_orders import ListOrdersHandler
from ordersvc.application.list_user_orders import ListUserOrdersHandler
from ordersvc.application.notifier import Notifier
from ordersvc.application.sales_report import OrderCountHandler, TotalSalesHandler
from ordersvc.application.show_order import ShowOrderHandler
from ordersvc.application.show_order_item import ShowOrderItemHandler
from ordersvc.application.update_order_status import UpdateOrderStatusHandler
from ordersvc.domain.repository.unit_of_work import UnitOfWork
from ordersvc.infrastructure.api.schemas import (
    CreateOrderRequest,
    DeleteOrderResponse,
    ErrorResponse,
    OrderCountResponse,
    OrderDetailSchema,
    OrderItemProductResponse,
    OrderSchema,
    OrderSummarySchema,
    TotalSalesResponse,
    UpdateStatusRequest,
)
from ordersvc.infrastructure.config import Settings

router = APIRouter(
    tags=["orders"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
def get_uow(request: Request) -> UnitOfWork:
    return request.app.state.uow_factory()


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
@router.get("", response_model=list[OrderSummarySchema])
def list_orders(uow: UnitOfWork = Depends(get_uow)) -> list[OrderSummarySchema]:
    return [
        OrderSummarySchema.model_validate(asdict(dto))
        for dto in ListOrdersHandler(uow).handle()
    ]


@router.get("/orderItems/{order_item_id}", response_model=OrderItemProductResponse)
def get_order_item(
    order_item_id: str, uow: UnitOfWork = Depends(get_uow)
) -> OrderItemProductResponse:
    product_id = ShowOrderItemHandler(uow).handle(order_item_id)
    return OrderItemProductResponse(product=product_id)


@router.get("/get/totalsales", response_model=TotalSalesResponse)
def total_sales(uow: UnitOfWork = Depends(get_uow)) -> TotalSalesResponse:
    return TotalSalesResponse(totalsales=TotalSalesHandler(uow).handle())


@router.get("/get/count", response_model=OrderCountResponse)
def order_count(uow: UnitOfWork = Depends(get_uow)) -> OrderCountResponse:
    return OrderCountResponse(order_count=OrderCountHandler(uow).handle())


@router.get("/get/userorders/{user_id}", response_model=list[OrderDetailSchema])
def user_orders(user_id: str, uow: UnitOfWork = Depends(get_uow)) -> list[OrderDetailSchema]:
    return [
        OrderDetailSchema.model_validate(asdict(dto))
        for dto in ListUserOrdersHandler(uow).handle(user_id)
    ]


@router.get("/{order_id}", response_model=OrderDetailSchema)
def get_order(order_id: str, uow: UnitOfWork = Depends(get_uow)) -> OrderDetailSchema:
    dto = ShowOrderHandler(uow).handle(order_id)
    return OrderDetailSchema.model_validate(asdict(dto))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderSchema)
def create_order(
    body: CreateOrderRequest,
    uow: UnitOfWork = Depends(get_uow),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> OrderSchema:
    command = CreateOrderCommand(
        items=[
            OrderItemSpec(product_id=item.product, quantity=item.quantity)
            for item in body.order_items
        ],
        shipping_address1=body.shipping_address1,
        shipping_address2=body.shipping_address2,
        city=body.city,
        zip=body.zip,
        country=body.country,
        phone=body.phone,
        status=body.status,
        user_id=body.user,
    )
    handler = CreateOrderHandler(
        uow,
        notifier,
        fallback_recipient=settings.confirmation_fallback_email,
        shop_name=settings.shop_name,
    )
    return OrderSchema.model_validate(asdict(handler.handle(command)))


@router.put("/{order_id}", response_model=OrderSchema)
def update_order_status(
    order_id: str, body: UpdateStatusRequest, uow: UnitOfWork = Depends(get_uow)
) -> OrderSchema:
    dto = UpdateOrderStatusHandler(uow).handle(order_id, body.status)
    return OrderSchema.model_validate(asdict(dto))


@router.delete("/{order_id}", response_model=DeleteOrderResponse)
def delete_order(order_id: str, uow: UnitOfWork = Depends(get_uow)) -> DeleteOrderResponse:
    DeleteOrderHandler(uow).handle(order_id)
    return DeleteOrderResponse()
