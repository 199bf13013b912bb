"""CLI commands for seeding the catalog and the user directory."""

from __future__ import annotations

import click

from ordersvc.application.add_category import AddCategoryHandler
from ordersvc.application.add_product import AddProductHandler
from ordersvc.application.add_user import AddUserHandler
from ordersvc.application.list_products import ListProductsHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.infrastructure.bootstrap import settings, unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--category", "category_id", default=None, help="Category ID.")
def product_add(name: str, price: str, stock: int, category_id: str | None) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work(settings()))

    try:
        product = handler.handle(
            name=name, price=price, count_in_stock=stock, category_id=category_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(unit_of_work(settings())).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 74)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {str(p.price):>10} {p.count_in_stock:>7}")


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a product category."""
    try:
        category = AddCategoryHandler(unit_of_work(settings())).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category.id} '{category.name}' added")


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", default=None, help="Address for order confirmations.")
def user_add(name: str, email: str | None) -> None:
    """Add a user who can place orders."""
    try:
        user = AddUserHandler(unit_of_work(settings())).handle(name, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} '{user.name}' added")
