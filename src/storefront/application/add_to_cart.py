"""Application service: Add To Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.views import get_or_create_cart, load_cart_view
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, product_id: int, quantity: int) -> CartDTO:
        """Add a product to the user's cart.

        Merges with an existing line for the same product; the stock check
        covers the merged quantity. Nothing is reserved.
        """
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            cart = get_or_create_cart(self._uow, user_id)
            line = cart.add(product, quantity)
            self._uow.carts.save(cart)
            self._uow.commit()

            logger.debug(
                "Cart line updated",
                user_id=user_id,
                product_id=product_id,
                line_quantity=line.quantity,
            )
            return load_cart_view(self._uow, user_id)
