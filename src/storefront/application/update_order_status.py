"""Application service: Update Order Status use case (privileged).

Applies any transition the order's transition table allows. The new
status is written only if the stored one is still the status that was
read, so a concurrent change makes this one fail with
InvalidTransitionError instead of overwriting it.

A move to CANCELLED also puts every line's stock back in the same unit
of work, exactly like a customer cancellation. A bare status change
would leave the allocated units out of stock for good.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.views import order_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, new_status: OrderStatus) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError("Order not found")

            previous = order.status
            order.transition_to(new_status)
            self._uow.orders.save(order, expected_status=previous)

            if new_status == OrderStatus.CANCELLED:
                InventoryAllocationService(self._uow.inventory).restore_for_order(order)

            self._uow.commit()

            logger.info(
                "Order status changed",
                order_id=order_id,
                from_status=previous.value,
                to_status=new_status.value,
            )
            return order_to_dto(self._uow, order)
