"""Application service: Update Cart Item use case.

Sets a line's quantity to an absolute value. The line must belong to the
caller's cart; anything else is reported as not found.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.views import load_cart_view
from storefront.domain.exceptions import NotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class UpdateCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, line_id: int, quantity: int) -> CartDTO:
        with self._uow:
            cart = self._uow.carts.get_by_user_id(user_id)
            if cart is None:
                raise NotFoundError("Cart item not found")

            cart.update(line_id, quantity)
            self._uow.carts.save(cart)
            self._uow.commit()
            return load_cart_view(self._uow, user_id)
