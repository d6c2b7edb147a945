"""Application service: Clear Cart use case.

Idempotent: clearing an empty or not-yet-created cart is not an error.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.views import load_cart_view
from storefront.domain.repository.unit_of_work import UnitOfWork


class ClearCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> CartDTO:
        with self._uow:
            cart = self._uow.carts.get_by_user_id(user_id)
            if cart is not None and not cart.is_empty:
                cart.clear()
                self._uow.carts.save(cart)
            view = load_cart_view(self._uow, user_id)
            self._uow.commit()
        return view
