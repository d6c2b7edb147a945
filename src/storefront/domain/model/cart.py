"""Cart aggregate: the mutable basket a customer builds before checkout.

Each user owns exactly one cart, created lazily on first access and never
deleted, only emptied. The cart holds at most one line per product.

Stock checks made here are advisory: they reject obviously impossible
quantities at the time of the mutation, but nothing is reserved. The
authoritative check happens at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import InsufficientStockError, NotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """One (product, quantity) entry of a cart.

    ``product`` is loaded together with the line so prices and stock are
    always the current ones; nothing about the product is copied here.
    """

    id: int | None
    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id  # type: ignore[return-value]

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    ``total_items`` and ``total_price`` are always computed from the lines,
    never stored.
    """

    id: int | None
    user_id: int
    lines: list[CartLine] = field(default_factory=list)

    @staticmethod
    def empty_for(user_id: int) -> Cart:
        return Cart(id=None, user_id=user_id)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> CartLine:
        """Add *quantity* units of *product*, merging with an existing line.

        The stock check uses the prospective line total (existing quantity
        plus the requested one), not just the delta.
        """
        qty = Quantity(quantity).value
        line = self.find_line_for(product.id)  # type: ignore[arg-type]
        prospective = qty if line is None else line.quantity + qty

        if not product.has_stock_for(prospective):
            raise InsufficientStockError(product.name, prospective, product.stock)

        if line is None:
            line = CartLine(id=None, product=product, quantity=qty)
            self.lines.append(line)
        else:
            line.product = product
            line.quantity = prospective
        return line

    def update(self, line_id: int, quantity: int) -> CartLine:
        """Replace the quantity of a line (absolute, not additive)."""
        qty = Quantity(quantity).value
        line = self.get_line(line_id)
        if not line.product.has_stock_for(qty):
            raise InsufficientStockError(line.product.name, qty, line.product.stock)
        line.quantity = qty
        return line

    def remove(self, line_id: int) -> None:
        line = self.get_line(line_id)
        self.lines.remove(line)

    def clear(self) -> None:
        self.lines.clear()

    # --- Lookups --------------------------------------------------------------

    def get_line(self, line_id: int) -> CartLine:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise NotFoundError("Cart item not found")

    def find_line_for(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Money:
        return Money.total(line.line_total for line in self.lines)
