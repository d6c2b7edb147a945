"""Shared table rendering for CLI output."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, OrderDTO


def display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart #{dto.id}  (user={dto.user_id})")
    if not dto.items:
        click.echo("  (empty)")
        return

    click.echo(f"  {'Line':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Items':<27} {dto.total_items:>5}")
    click.echo(f"  {'Cart Total':<27} {dto.total_price:>27}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.shipping_address:
        click.echo(f"Ship to:  {dto.shipping_address}")
    if dto.billing_address:
        click.echo(f"Bill to:  {dto.billing_address}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()

    click.echo(f"  {'Product':<20} {'Category':<14} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        name = item.product_name or f"#{item.product_id}"
        category = item.category_name or "-"
        click.echo(
            f"  {name:<20} {category:<14} {item.quantity:>5} "
            f"{item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<27} {dto.total:>35}")


def display_order_summary(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<6} {'Status':<10} {'Items':>6} {'Total':>12}  Created")
    click.echo("-" * 70)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.user_id:<6} {dto.status:<10} {dto.total_items:>6} {dto.total:>12}  {dto.created_at}"
        )
