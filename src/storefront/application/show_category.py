"""Application service: Show Category use case (query)."""

from __future__ import annotations

from storefront.application.dto import CategoryDetailDTO
from storefront.application.views import category_to_dto, product_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowCategoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category_id: int) -> CategoryDetailDTO:
        """Return the category together with its products."""
        with self._uow:
            category = self._uow.categories.get_by_id(category_id)
            if category is None:
                raise NotFoundError("Category not found")

            products = self._uow.products.list_all(category_id=category_id)
            return CategoryDetailDTO(
                category=category_to_dto(self._uow, category),
                products=[product_to_dto(self._uow, p) for p in products],
            )
