"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order with its lines and assign their IDs."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_for_user(self, user_id: int, order_id: int) -> Order | None:
        """Return the order only if it belongs to *user_id*."""

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[Order]:
        """Return the user's orders, newest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def save(self, order: Order, expected_status: OrderStatus) -> None:
        """Persist the order's new status if the stored one is still *expected_status*.

        The check and the write are one conditional update, so two
        concurrent changes from the same status cannot both succeed.
        Raises InvalidTransitionError when the stored status has moved on
        and NotFoundError when the order no longer exists.
        """

    @abstractmethod
    def exists_for_product(self, product_id: int) -> bool:
        """Return True if any order line references the product."""
