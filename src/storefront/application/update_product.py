"""Application service: Update Product use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.views import product_to_dto
from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        price: str | None = None,
        category_id: int | None = None,
    ) -> ProductDTO:
        """Update a product's name, price and/or category.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout. Stock is not editable here; use the
        restock use case.
        """
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            if category_id is not None:
                if self._uow.categories.get_by_id(category_id) is None:
                    raise NotFoundError("Category not found")
                product.move_to(category_id)
            if name is not None:
                product.rename(name)
            if price is not None:
                product.update_price(Money.of(price))

            self._uow.products.save(product)
            self._uow.commit()
            return product_to_dto(self._uow, product)
