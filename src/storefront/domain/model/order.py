"""Order aggregate: the immutable record of a checkout.

An Order is created once from a cart and afterwards only its ``status``
moves, along the edges of ``ALLOWED_TRANSITIONS``. Line items capture the
product price at checkout time so later catalog price changes never
reach historical orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import BadRequestError, EmptyCartError, InvalidTransitionError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

# A status without a row would silently become terminal.
_unmapped = set(OrderStatus) - set(ALLOWED_TRANSITIONS)
if _unmapped:
    raise RuntimeError(
        "Order transition table is missing: "
        + ", ".join(sorted(status.value for status in _unmapped))
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderLine:
    """Snapshot of one purchased product, quantity and unit price."""

    id: int | None
    product_id: int
    quantity: int
    price: Money  # locked at checkout time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The ``__init__`` stays simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: int
    total: Money
    items: list[OrderLine]
    status: OrderStatus = OrderStatus.PENDING
    shipping_address: str | None = None
    billing_address: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        cart: Cart,
        shipping_address: str | None = None,
        billing_address: str | None = None,
        notes: str | None = None,
    ) -> Order:
        """Snapshot *cart* into a new PENDING order.

        Lines keep the cart-line order and copy each product's current
        price. The total is the cart's total price at this moment.
        """
        if cart.is_empty:
            raise EmptyCartError()

        items = [
            OrderLine(
                id=None,
                product_id=line.product_id,
                quantity=line.quantity,
                price=line.product.price,  # <-- price snapshot
            )
            for line in cart.lines
        ]
        return Order(
            id=None,
            user_id=cart.user_id,
            total=cart.total_price,
            items=items,
            shipping_address=shipping_address,
            billing_address=billing_address,
            notes=notes,
        )

    # --- State transitions ----------------------------------------------------

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move to *new_status* if the transition table allows it.

        Stock restoration for a move to CANCELLED is coordinated by the
        application handler via the allocation service.
        """
        if not self.can_transition_to(new_status):
            raise InvalidTransitionError(self.status, new_status)
        self.status = new_status
        self.updated_at = _utcnow()

    def cancel_by_customer(self) -> None:
        """Self-service cancellation, allowed from PENDING only.

        Stricter than the transition table: CONFIRMED -> CANCELLED is left
        to privileged status updates.
        """
        if self.status != OrderStatus.PENDING:
            raise BadRequestError("Only pending orders can be cancelled")
        self.transition_to(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)
