"""Application service: Place Order (checkout) use case.

Turns the user's cart into an immutable order inside one unit of work:

1. Load the cart; an empty cart is rejected.
2. Re-check every line against current stock (fast rejection before any
   write).
3. Create the order and its price-snapshot lines, decrement stock per
   line through the ledger, and empty the cart.
4. Commit and return the materialised order.

If anything fails after step 1 (a decrement losing a race, a storage
error) the unit of work rolls back: no order, no stock change, cart
untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CheckoutDetails, OrderDTO
from storefront.application.views import order_to_dto
from storefront.domain.exceptions import EmptyCartError, InsufficientStockError
from storefront.domain.model.order import Order
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, details: CheckoutDetails | None = None) -> OrderDTO:
        details = details or CheckoutDetails()

        with self._uow:
            cart = self._uow.carts.get_by_user_id(user_id)
            if cart is None or cart.is_empty:
                raise EmptyCartError()

            svc = InventoryAllocationService(self._uow.inventory)
            try:
                svc.verify_cart(cart)

                order = Order.place(
                    cart,
                    shipping_address=details.shipping_address,
                    billing_address=details.billing_address,
                    notes=details.notes,
                )
                self._uow.orders.add(order)
                svc.allocate_for_order(order)
            except InsufficientStockError as exc:
                logger.info(
                    "Checkout rejected for insufficient stock",
                    user_id=user_id,
                    product=exc.product_name,
                    requested=exc.requested,
                    available=exc.available,
                )
                raise

            cart.clear()
            self._uow.carts.save(cart)
            self._uow.commit()

            logger.info(
                "Order placed",
                user_id=user_id,
                order_id=order.id,
                total=str(order.total),
                lines=len(order.items),
            )
            return order_to_dto(self._uow, order)
