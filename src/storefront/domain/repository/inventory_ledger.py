"""Inventory ledger port: the only writer of ``Product.stock``.

Implementations run inside the caller's unit of work: a decrement or
increment is never durable on its own, it commits or rolls back together
with the checkout or cancellation that issued it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class InventoryLedger(ABC):

    @abstractmethod
    def check_available(self, product_id: int, quantity: int) -> bool:
        """Return True if the product currently has at least *quantity* in stock."""

    @abstractmethod
    def decrement(self, product_id: int, quantity: int) -> None:
        """Take *quantity* units out of stock.

        The sufficiency check and the write are one conditional update, so
        a concurrent decrement can never drive stock below zero.

        Raises InsufficientStockError when stock < quantity and
        NotFoundError when the product no longer exists.
        """

    @abstractmethod
    def increment(self, product_id: int, quantity: int) -> None:
        """Put *quantity* units back into stock.

        Raises NotFoundError when the product no longer exists.
        """
