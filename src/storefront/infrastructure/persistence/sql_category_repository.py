"""SQLAlchemy-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import CategoryRepository
from storefront.infrastructure.persistence.orm import CategoryRow, ProductRow


class SqlCategoryRepository(CategoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: int) -> Category | None:
        row = self._session.get(CategoryRow, category_id)
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Category | None:
        stmt = select(CategoryRow).where(func.lower(CategoryRow.name) == name.strip().lower())
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Category]:
        rows = self._session.execute(select(CategoryRow).order_by(CategoryRow.id)).scalars()
        return [self._to_domain(row) for row in rows]

    def count_products(self, category_id: int) -> int:
        stmt = select(func.count(ProductRow.id)).where(ProductRow.category_id == category_id)
        return self._session.execute(stmt).scalar_one()

    def add(self, category: Category) -> None:
        row = CategoryRow(name=category.name, description=category.description)
        self._session.add(row)
        self._session.flush()
        category.id = row.id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: CategoryRow) -> Category:
        return Category(id=row.id, name=row.name, description=row.description)
