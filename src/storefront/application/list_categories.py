"""Application service: List Categories use case (query)."""

from __future__ import annotations

from storefront.application.dto import CategoryDTO
from storefront.application.views import category_to_dto
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListCategoriesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[CategoryDTO]:
        with self._uow:
            return [
                category_to_dto(self._uow, category)
                for category in self._uow.categories.list_all()
            ]
