"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.views import order_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_for_user(user_id, order_id)
            if order is None:
                raise NotFoundError("Order not found")
            return order_to_dto(self._uow, order)
