"""SQLAlchemy-backed InventoryLedger.

A decrement is a single conditional UPDATE::

    UPDATE products SET stock = stock - :qty WHERE id = :id AND stock >= :qty

so the sufficiency check and the write cannot be separated by a
concurrent buyer. Under contention the database serialises the updates on
the product row; the loser sees zero affected rows and gets
InsufficientStockError. There is no retry.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.domain.exceptions import InsufficientStockError, NotFoundError
from storefront.domain.repository.inventory_ledger import InventoryLedger
from storefront.infrastructure.persistence.orm import ProductRow


class SqlInventoryLedger(InventoryLedger):

    def __init__(self, session: Session) -> None:
        self._session = session

    def check_available(self, product_id: int, quantity: int) -> bool:
        stock = self._session.execute(
            select(ProductRow.stock).where(ProductRow.id == product_id)
        ).scalar_one_or_none()
        return stock is not None and stock >= quantity

    def decrement(self, product_id: int, quantity: int) -> None:
        stmt = (
            update(ProductRow)
            .where(ProductRow.id == product_id, ProductRow.stock >= quantity)
            .values(stock=ProductRow.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        if self._session.execute(stmt).rowcount == 1:
            return

        current = self._session.execute(
            select(ProductRow.name, ProductRow.stock).where(ProductRow.id == product_id)
        ).one_or_none()
        if current is None:
            raise NotFoundError("Product not found")
        raise InsufficientStockError(current.name, quantity, current.stock)

    def increment(self, product_id: int, quantity: int) -> None:
        stmt = (
            update(ProductRow)
            .where(ProductRow.id == product_id)
            .values(stock=ProductRow.stock + quantity)
            .execution_options(synchronize_session=False)
        )
        if self._session.execute(stmt).rowcount != 1:
            raise NotFoundError("Product not found")
