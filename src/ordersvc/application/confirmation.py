"""Order confirmation message, sent once an order has been committed."""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.model.order import Order
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.user import User

SUBJECT = "Order Confirmation"


@dataclass(frozen=True)
class ConfirmationMessage:
    to: str
    subject: str
    body: str


def render_confirmation(
    order: Order,
    products: dict[str, Product],
    user: User | None,
    fallback_recipient: str,
    shop_name: str,
) -> ConfirmationMessage:
    """Build the confirmation email for *order*.

    *products* are the products resolved while pricing the order, so each
    line shows the price the customer was charged. The message goes to
    the purchaser when they have an email on file, otherwise to
    *fallback_recipient*.
    """
    greeting = user.name if user is not None else "Customer"
    lines = [
        f"Dear {greeting},",
        "",
        "Thank you for your purchase. We appreciate your business!",
        "",
        "Your order details:",
    ]
    for item in order.items:
        product = products[item.product_id]
        qty = item.quantity.value
        lines += [
            "",
            f"Product: {product.name}",
            f"Price: {product.price}",
            f"Quantity: {qty}",
            f"Total: {product.price * qty}",
        ]
    lines += [
        "",
        f"Order total: {order.total_price}",
        "",
        "If you have any questions or concerns, please feel free to contact us.",
        "",
        "Regards,",
        shop_name,
    ]

    recipient = user.email if user is not None and user.email else fallback_recipient
    return ConfirmationMessage(to=recipient, subject=SUBJECT, body="\n".join(lines))
