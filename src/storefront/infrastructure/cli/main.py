import click

from storefront.infrastructure.bootstrap import init_database, settings
from storefront.infrastructure.cli.access import Principal, Role
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_all,
    order_cancel,
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    category_add,
    category_list,
    category_show,
    product_add,
    product_list,
    product_remove,
    product_restock,
    product_show,
    product_update,
)
from storefront.infrastructure.logging import bind_principal, configure_logging


@click.group()
@click.option("--user", "user_id", type=int, envvar="STOREFRONT_USER_ID", help="Acting user ID.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=Role.CUSTOMER.value,
    show_default=True,
    envvar="STOREFRONT_ROLE",
    help="Acting user's role.",
)
@click.pass_context
def cli(ctx: click.Context, user_id: int | None, role: str) -> None:
    """Storefront: carts, checkout and order management."""
    configure_logging(settings())
    principal = Principal(user_id=user_id, role=Role(role.upper()))
    if user_id is not None:
        bind_principal(user_id, principal.role.value)
    ctx.obj = principal


@cli.group()
def db() -> None:
    """Manage the database."""


@db.command("init")
def db_init() -> None:
    """Create any missing tables."""
    url = init_database()
    click.echo(f"Database ready at {url}")


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_list)
category.add_command(category_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_restock)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_all)
order.add_command(order_cancel)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
