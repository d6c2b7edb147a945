"""Application service: Show Cart use case.

Creates the user's cart lazily, so asking for it is always safe.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.views import load_cart_view
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> CartDTO:
        with self._uow:
            view = load_cart_view(self._uow, user_id)
            self._uow.commit()
        return view
