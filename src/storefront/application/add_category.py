"""Application service: Add Category use case."""

from __future__ import annotations

from storefront.application.dto import CategoryDTO
from storefront.application.views import category_to_dto
from storefront.domain.exceptions import BadRequestError
from storefront.domain.model.product import Category
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, description: str | None = None) -> CategoryDTO:
        category = Category.create(name, description)

        with self._uow:
            if self._uow.categories.get_by_name(category.name) is not None:
                raise BadRequestError(f"Category '{category.name}' already exists")

            self._uow.categories.add(category)
            self._uow.commit()
            return category_to_dto(self._uow, category)
