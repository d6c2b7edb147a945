"""Domain service: Inventory Allocation.

Coordinates the cross-aggregate stock movements of checkout and
cancellation through the InventoryLedger. It lives in the domain layer
because the rules (which quantities move, in which order, what counts as
insufficient) are business rules, not orchestration.

The service never opens or commits a transaction; the caller's unit of
work decides whether its movements become durable.
"""

from __future__ import annotations

from storefront.domain.exceptions import InsufficientStockError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.repository.inventory_ledger import InventoryLedger


class InventoryAllocationService:

    def __init__(self, ledger: InventoryLedger) -> None:
        self._ledger = ledger

    def verify_cart(self, cart: Cart) -> None:
        """Fail fast if any cart line exceeds current stock.

        This is the authoritative pre-check before any write; the cart's
        own checks were made when the lines were added and may be stale.
        """
        for line in cart.lines:
            if not self._ledger.check_available(line.product_id, line.quantity):
                raise InsufficientStockError(
                    line.product.name, line.quantity, line.product.stock
                )

    def allocate_for_order(self, order: Order) -> None:
        """Decrement stock for every order line, in line order.

        Each decrement re-verifies sufficiency itself, so stock that
        dropped after ``verify_cart`` surfaces here as
        InsufficientStockError and the whole unit of work rolls back.
        """
        for line in order.items:
            self._ledger.decrement(line.product_id, line.quantity)

    def restore_for_order(self, order: Order) -> None:
        """Exact inverse of ``allocate_for_order``."""
        for line in order.items:
            self._ledger.increment(line.product_id, line.quantity)
