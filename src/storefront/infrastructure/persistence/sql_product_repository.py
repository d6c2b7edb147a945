"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.orm import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        # Stock may have moved through a ledger UPDATE since the row was
        # first loaded in this session.
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return to_domain_product(row) if row is not None else None

    def list_all(self, category_id: int | None = None) -> list[Product]:
        stmt = select(ProductRow).order_by(ProductRow.id)
        if category_id is not None:
            stmt = stmt.where(ProductRow.category_id == category_id)
        rows = self._session.execute(stmt.execution_options(populate_existing=True)).scalars()
        return [to_domain_product(row) for row in rows]

    def add(self, product: Product) -> None:
        row = ProductRow(
            name=product.name,
            price=product.price.amount,
            stock=product.stock,
            category_id=product.category_id,
        )
        self._session.add(row)
        self._session.flush()
        product.id = row.id

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            raise NotFoundError("Product not found")
        row.name = product.name
        row.price = product.price.amount
        row.category_id = product.category_id
        self._session.flush()

    def remove(self, product_id: int) -> None:
        # cart_items rows go through ON DELETE CASCADE.
        stmt = delete(ProductRow).where(ProductRow.id == product_id)
        if self._session.execute(stmt).rowcount != 1:
            raise NotFoundError("Product not found")


def to_domain_product(row: ProductRow) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        price=Money(Decimal(row.price)),
        stock=row.stock,
        category_id=row.category_id,
    )
