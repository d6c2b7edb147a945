"""Application service: Cancel Order use case (self-service).

A customer may cancel their own order only while it is PENDING. The
status change and the restoration of every line's stock commit together
or not at all.

The status is written with a compare-and-swap against PENDING before any
stock moves, so of two overlapping cancellations only one restores stock.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.views import order_to_dto
from storefront.domain.exceptions import BadRequestError, InvalidTransitionError, NotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_for_user(user_id, order_id)
            if order is None:
                raise NotFoundError("Order not found")

            order.cancel_by_customer()
            try:
                self._uow.orders.save(order, expected_status=OrderStatus.PENDING)
            except InvalidTransitionError as exc:
                logger.info(
                    "Cancellation lost to a concurrent status change",
                    user_id=user_id,
                    order_id=order_id,
                    current=exc.current.value,
                )
                raise BadRequestError("Only pending orders can be cancelled") from exc

            InventoryAllocationService(self._uow.inventory).restore_for_order(order)
            self._uow.commit()

            logger.info(
                "Order cancelled by customer, stock restored",
                user_id=user_id,
                order_id=order_id,
            )
            return order_to_dto(self._uow, order)
