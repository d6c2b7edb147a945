"""Unit of Work: the transaction boundary of every multi-step mutation.

Handlers use it as a context manager::

    with uow:
        ...
        uow.commit()

Leaving the block without ``commit()`` (business-rule failure,
infrastructure error, or an early return) rolls everything back. A
rollback after a successful commit is a no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.inventory_ledger import InventoryLedger
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import (
    CategoryRepository,
    ProductRepository,
)


class UnitOfWork(ABC):

    categories: CategoryRepository
    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository
    inventory: InventoryLedger

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change made through this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change."""
