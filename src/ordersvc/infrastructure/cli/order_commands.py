"""CLI commands for reading orders and sales figures."""

from __future__ import annotations

import click

from ordersvc.application.dto import OrderDetailDTO
from ordersvc.application.list_orders import ListOrdersHandler
from ordersvc.application.sales_report import OrderCountHandler, TotalSalesHandler
from ordersvc.application.show_order import ShowOrderHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.infrastructure.bootstrap import settings, unit_of_work


@click.command("list")
def order_list() -> None:
    """List orders, newest first."""
    try:
        orders = ListOrdersHandler(unit_of_work(settings())).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'Placed':<17} {'Customer':<20} {'Status':<12} {'Total':>10}")
    click.echo("-" * 97)
    for o in orders:
        customer = o.user.name if o.user else "?"
        placed = o.date_ordered.strftime("%Y-%m-%d %H:%M")
        click.echo(f"{o.id:<34} {placed:<17} {customer:<20} {o.status:<12} {o.total_price:>10}")


def _display_order(dto: OrderDetailDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.user.name if dto.user else '?'}")
    click.echo(f"Placed:   {dto.date_ordered.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo(f"Ship to:  {dto.shipping_address1}, {dto.city} {dto.zip}, {dto.country}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*37}")
    for item in dto.order_items:
        name = item.product.name if item.product else "(removed)"
        price = item.product.price if item.product else "-"
        click.echo(f"  {name:<20} {item.quantity:>5} {price:>10}")
    click.echo(f"  {'-'*37}")
    click.echo(f"  {'Order Total':<26} {dto.total_price:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(unit_of_work(settings())).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("sales")
def report_sales() -> None:
    """Print total revenue over all orders."""
    try:
        total = TotalSalesHandler(unit_of_work(settings())).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total sales: {total}")


@click.command("count")
def report_count() -> None:
    """Print the number of orders."""
    try:
        count = OrderCountHandler(unit_of_work(settings())).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders: {count}")
