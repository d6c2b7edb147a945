"""Application service: Remove Product use case (privileged).

A product that appears on any order stays in the catalog so order
history keeps pointing at it. Otherwise it is deleted, and every cart
line holding it disappears with it.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import BadRequestError, NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")
            if self._uow.orders.exists_for_product(product_id):
                raise BadRequestError(
                    f"Product '{product.name}' has orders and cannot be removed"
                )

            self._uow.products.remove(product_id)
            self._uow.commit()

            logger.info("Product removed", product_id=product_id, name=product.name)
