"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.views import product_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str, stock: int, category_id: int) -> ProductDTO:
        """Add a new product to the catalog with its opening stock."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            stock=stock,
            category_id=category_id,
        )

        with self._uow:
            if self._uow.categories.get_by_id(category_id) is None:
                raise NotFoundError("Category not found")

            self._uow.products.add(product)
            self._uow.commit()
            return product_to_dto(self._uow, product)
