"""CLI commands for the caller's shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.access import Role, current_principal, requires_role
from storefront.infrastructure.cli.formatting import display_cart


@click.command("show")
@requires_role(Role.CUSTOMER)
def cart_show() -> None:
    """Show the cart (creates it on first use)."""
    user_id = current_principal().require_user()
    display_cart(ShowCartHandler(unit_of_work()).handle(user_id))


@click.command("add")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=click.IntRange(min=1), help="Units to add.")
@requires_role(Role.CUSTOMER)
def cart_add(product_id: int, quantity: int) -> None:
    """Add a product to the cart."""
    user_id = current_principal().require_user()
    handler = AddToCartHandler(unit_of_work())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("update")
@click.option("--line", "line_id", required=True, type=int, help="Cart line ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="New quantity.")
@requires_role(Role.CUSTOMER)
def cart_update(line_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    user_id = current_principal().require_user()
    handler = UpdateCartItemHandler(unit_of_work())

    try:
        dto = handler.handle(user_id=user_id, line_id=line_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("remove")
@click.option("--line", "line_id", required=True, type=int, help="Cart line ID.")
@requires_role(Role.CUSTOMER)
def cart_remove(line_id: int) -> None:
    """Remove a line from the cart."""
    user_id = current_principal().require_user()
    handler = RemoveFromCartHandler(unit_of_work())

    try:
        dto = handler.handle(user_id=user_id, line_id=line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("clear")
@requires_role(Role.CUSTOMER)
def cart_clear() -> None:
    """Remove every line from the cart."""
    user_id = current_principal().require_user()
    display_cart(ClearCartHandler(unit_of_work()).handle(user_id))
