"""Application service: Restock Product use case (privileged).

Receiving goods is the only stock movement outside checkout and
cancellation; it goes through the same ledger increment so stock keeps a
single writer.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.views import product_to_dto
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class RestockProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        qty = Quantity(quantity).value

        with self._uow:
            self._uow.inventory.increment(product_id, qty)
            self._uow.commit()

            product = self._uow.products.get_by_id(product_id)

            logger.info("Product restocked", product_id=product_id, added=qty, stock=product.stock)
            return product_to_dto(self._uow, product)
