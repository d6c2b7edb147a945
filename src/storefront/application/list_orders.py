"""Application services: order listing queries."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.views import order_to_dto
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListUserOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> list[OrderDTO]:
        with self._uow:
            orders = self._uow.orders.list_for_user(user_id)
            return [order_to_dto(self._uow, order) for order in orders]


class ListAllOrdersHandler:
    """Privileged: no ownership filter."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDTO]:
        with self._uow:
            orders = self._uow.orders.list_all()
            return [order_to_dto(self._uow, order) for order in orders]
