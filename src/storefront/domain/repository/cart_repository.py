"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_user_id(self, user_id: int) -> Cart | None:
        """Return the user's cart with its lines and their current products."""

    @abstractmethod
    def add(self, cart: Cart) -> None:
        """Persist a new, empty cart and assign its ID."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Synchronise the stored lines with ``cart.lines``.

        Lines without an ID are inserted (and get one), lines missing from
        the aggregate are deleted, the rest have their quantity updated.
        """
