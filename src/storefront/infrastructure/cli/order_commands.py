"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.dto import CheckoutDetails
from storefront.application.list_orders import ListAllOrdersHandler, ListUserOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.access import Role, current_principal, requires_role
from storefront.infrastructure.cli.formatting import display_order, display_order_summary


@click.command("place")
@click.option("--shipping-address", default=None, help="Shipping address.")
@click.option("--billing-address", default=None, help="Billing address.")
@click.option("--notes", default=None, help="Free-text notes for the order.")
@requires_role(Role.CUSTOMER)
def order_place(
    shipping_address: str | None,
    billing_address: str | None,
    notes: str | None,
) -> None:
    """Check out the cart into a new order."""
    user_id = current_principal().require_user()
    handler = PlaceOrderHandler(unit_of_work())
    details = CheckoutDetails(
        shipping_address=shipping_address,
        billing_address=billing_address,
        notes=notes,
    )

    try:
        dto = handler.handle(user_id, details)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed  (status={dto.status})")
    click.echo()
    display_order(dto)


@click.command("list")
@requires_role(Role.CUSTOMER)
def order_list() -> None:
    """List your orders, newest first."""
    user_id = current_principal().require_user()
    display_order_summary(ListUserOrdersHandler(unit_of_work()).handle(user_id))


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@requires_role(Role.CUSTOMER)
def order_show(order_id: int) -> None:
    """Show details of one of your orders."""
    user_id = current_principal().require_user()
    handler = ShowOrderHandler(unit_of_work())

    try:
        dto = handler.handle(user_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@requires_role(Role.CUSTOMER)
def order_cancel(order_id: int) -> None:
    """Cancel a pending order (restores stock)."""
    user_id = current_principal().require_user()
    handler = CancelOrderHandler(unit_of_work())

    try:
        handler.handle(user_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled — stock restored.")


@click.command("all")
@requires_role(Role.ADMIN)
def order_all() -> None:
    """List every order (admin)."""
    display_order_summary(ListAllOrdersHandler(unit_of_work()).handle())


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--to",
    "new_status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="Target status.",
)
@requires_role(Role.ADMIN)
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to a new status (admin)."""
    handler = UpdateOrderStatusHandler(unit_of_work())

    try:
        dto = handler.handle(order_id, OrderStatus(new_status.upper()))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
