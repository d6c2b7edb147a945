"""Application services: catalog product queries."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.views import product_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category_id: int | None = None) -> list[ProductDTO]:
        with self._uow:
            if category_id is not None and self._uow.categories.get_by_id(category_id) is None:
                raise NotFoundError("Category not found")
            products = self._uow.products.list_all(category_id=category_id)
            return [product_to_dto(self._uow, p) for p in products]


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> ProductDTO:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")
            return product_to_dto(self._uow, product)
