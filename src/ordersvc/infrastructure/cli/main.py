import click
import uvicorn

from ordersvc.infrastructure import bootstrap
from ordersvc.infrastructure.cli.catalog_commands import (
    category_add,
    product_add,
    product_list,
    user_add,
)
from ordersvc.infrastructure.cli.order_commands import (
    order_list,
    order_show,
    report_count,
    report_sales,
)
from ordersvc.infrastructure.logging import configure_logging
from ordersvc.infrastructure.persistence.database import create_schema


@click.group()
def cli() -> None:
    """Order Service: orders, catalog seeding and reports"""
    configure_logging(bootstrap.settings())


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port.")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    uvicorn.run(
        "ordersvc.infrastructure.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@cli.group()
def db() -> None:
    """Manage the database."""


@db.command("init")
def db_init() -> None:
    """Create any missing tables."""
    config = bootstrap.settings()
    create_schema(bootstrap.engine(config.database_url))
    click.echo("Database schema is up to date.")


@cli.group()
def order() -> None:
    """Inspect orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def report() -> None:
    """Sales reports."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
category.add_command(category_add)
user.add_command(user_add)
report.add_command(report_sales)
report.add_command(report_count)
