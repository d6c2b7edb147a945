"""Catalog aggregates: Category and Product.

Products live independently of carts and orders. Prices change and
products move between categories; neither affects orders that were
already placed because orders capture a price snapshot at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import BadRequestError
from storefront.domain.model.value_objects import Money


@dataclass
class Category:

    id: int | None
    name: str
    description: str | None = None

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        if not name or not name.strip():
            raise BadRequestError("Category name is required")
        return Category(id=None, name=name.strip(), description=description)


@dataclass
class Product:
    """A product in the catalog.

    ``stock`` is owned by the inventory ledger: it is set once when the
    product is created and afterwards only moves through the ledger's
    decrement/increment operations, never through ``rename`` or
    ``update_price``.
    """

    id: int | None
    name: str
    price: Money
    stock: int
    category_id: int

    @staticmethod
    def create(name: str, price: Money, stock: int, category_id: int) -> Product:
        if not name or not name.strip():
            raise BadRequestError("Product name is required")
        if stock < 0:
            raise BadRequestError("Initial stock cannot be negative")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            stock=stock,
            category_id=category_id,
        )

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise BadRequestError("Product name is required")
        self.name = new_name.strip()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing carts see the new price immediately (cart totals are
        always derived); existing orders do not.
        """
        self.price = new_price

    def move_to(self, category_id: int) -> None:
        self.category_id = category_id
