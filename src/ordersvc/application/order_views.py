"""Mapping from Order aggregates to output DTOs.

Expanded views are assembled with explicit batch lookups: collect the
referenced IDs, fetch each kind of entity once, then join in memory.
"""

from __future__ import annotations

from ordersvc.application.dto import (
    CategoryDTO,
    OrderDetailDTO,
    OrderDTO,
    OrderItemDetailDTO,
    OrderSummaryDTO,
    ProductDTO,
    UserRefDTO,
)
from ordersvc.domain.model.category import Category
from ordersvc.domain.model.order import Order
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.user import User
from ordersvc.domain.repository.unit_of_work import UnitOfWork


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_items=order.item_ids,
        shipping_address1=order.shipping.address1,
        shipping_address2=order.shipping.address2,
        city=order.shipping.city,
        zip=order.shipping.zip,
        country=order.shipping.country,
        phone=order.shipping.phone,
        status=order.status,
        total_price=str(order.total_price),
        user=order.user_id,
        date_ordered=order.date_ordered,
    )


def to_summary_dtos(orders: list[Order], uow: UnitOfWork) -> list[OrderSummaryDTO]:
    users = uow.users.get_many(sorted({o.user_id for o in orders}))
    return [
        OrderSummaryDTO(
            id=order.id,  # type: ignore[arg-type]
            order_items=order.item_ids,
            shipping_address1=order.shipping.address1,
            shipping_address2=order.shipping.address2,
            city=order.shipping.city,
            zip=order.shipping.zip,
            country=order.shipping.country,
            phone=order.shipping.phone,
            status=order.status,
            total_price=str(order.total_price),
            user=_user_ref(users.get(order.user_id)),
            date_ordered=order.date_ordered,
        )
        for order in orders
    ]


def to_detail_dtos(orders: list[Order], uow: UnitOfWork) -> list[OrderDetailDTO]:
    users = uow.users.get_many(sorted({o.user_id for o in orders}))
    products = uow.products.get_many(
        sorted({pid for o in orders for pid in o.product_ids})
    )
    categories = uow.categories.get_many(
        sorted({p.category_id for p in products.values() if p.category_id})
    )

    result: list[OrderDetailDTO] = []
    for order in orders:
        items = [
            OrderItemDetailDTO(
                id=item.id,  # type: ignore[arg-type]
                quantity=item.quantity.value,
                product=_product_dto(products.get(item.product_id), categories),
            )
            for item in order.items
        ]
        result.append(
            OrderDetailDTO(
                id=order.id,  # type: ignore[arg-type]
                shipping_address1=order.shipping.address1,
                shipping_address2=order.shipping.address2,
                city=order.shipping.city,
                zip=order.shipping.zip,
                country=order.shipping.country,
                phone=order.shipping.phone,
                status=order.status,
                total_price=str(order.total_price),
                user=_user_ref(users.get(order.user_id)),
                date_ordered=order.date_ordered,
                order_items=items,
            )
        )
    return result


# --- Internal helpers ---------------------------------------------------------


def _user_ref(user: User | None) -> UserRefDTO | None:
    if user is None:
        return None
    return UserRefDTO(id=user.id, name=user.name)  # type: ignore[arg-type]


def _product_dto(
    product: Product | None, categories: dict[str, Category]
) -> ProductDTO | None:
    # Products removed from the catalog after the order was placed
    if product is None:
        return None
    category = categories.get(product.category_id) if product.category_id else None
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=str(product.price),
        count_in_stock=product.count_in_stock,
        category=CategoryDTO(id=category.id, name=category.name) if category else None,  # type: ignore[arg-type]
    )
