"""CLI commands for the catalog: categories and products."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.list_categories import ListCategoriesHandler
from storefront.application.list_products import ListProductsHandler, ShowProductHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.restock_product import RestockProductHandler
from storefront.application.show_category import ShowCategoryHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.access import Role, requires_role


def _display_product(dto: ProductDTO) -> None:
    click.echo(
        f"Product #{dto.id} '{dto.name}' at {dto.price} "
        f"(stock={dto.stock}, category={dto.category_name})"
    )


def _display_product_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  Category")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7}  {p.category_name}")


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default=None, help="Optional description.")
@requires_role(Role.ADMIN)
def category_add(name: str, description: str | None) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(unit_of_work())

    try:
        dto = handler.handle(name=name, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = ListCategoriesHandler(unit_of_work()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Products':>8}")
    click.echo("-" * 36)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<20} {c.product_count:>8}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
def category_show(category_id: int) -> None:
    """Show a category and its products."""
    try:
        dto = ShowCategoryHandler(unit_of_work()).handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{dto.category.id} '{dto.category.name}'")
    if dto.category.description:
        click.echo(f"  {dto.category.description}")
    click.echo()
    _display_product_table(dto.products)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=click.IntRange(min=0), help="Opening stock.")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@requires_role(Role.ADMIN)
def product_add(name: str, price: str, stock: int, category_id: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work())

    try:
        dto = handler.handle(name=name, price=price, stock=stock, category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("list")
@click.option("--category", "category_id", default=None, type=int, help="Only this category.")
def product_list(category_id: int | None) -> None:
    """List products in the catalog."""
    try:
        products = ListProductsHandler(unit_of_work()).handle(category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product_table(products)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    try:
        dto = ShowProductHandler(unit_of_work()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", "category_id", default=None, type=int, help="New category ID.")
@requires_role(Role.ADMIN)
def product_update(
    product_id: int,
    name: str | None,
    price: str | None,
    category_id: int | None,
) -> None:
    """Update a product's name, price or category."""
    handler = UpdateProductHandler(unit_of_work())

    try:
        dto = handler.handle(product_id, name=name, price=price, category_id=category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units received.")
@requires_role(Role.ADMIN)
def product_restock(product_id: int, quantity: int) -> None:
    """Add received units to a product's stock."""
    handler = RestockProductHandler(unit_of_work())

    try:
        dto = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@requires_role(Role.ADMIN)
def product_remove(product_id: int) -> None:
    """Remove a product that no order references."""
    handler = RemoveProductHandler(unit_of_work())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")
