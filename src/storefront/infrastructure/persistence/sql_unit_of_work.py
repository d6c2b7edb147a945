"""SQLAlchemy-backed UnitOfWork: one session, one transaction."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from storefront.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from storefront.infrastructure.persistence.sql_inventory_ledger import SqlInventoryLedger
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def __enter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        self.categories = SqlCategoryRepository(self.session)
        self.products = SqlProductRepository(self.session)
        self.carts = SqlCartRepository(self.session)
        self.orders = SqlOrderRepository(self.session)
        self.inventory = SqlInventoryLedger(self.session)
        return super().__enter__()

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self.session.close()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
