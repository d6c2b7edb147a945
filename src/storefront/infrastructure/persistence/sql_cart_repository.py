"""SQLAlchemy-backed implementation of CartRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.orm import CartItemRow, CartRow
from storefront.infrastructure.persistence.sql_product_repository import (
    to_domain_product,
)


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CartRepository interface ---------------------------------------------

    def get_by_user_id(self, user_id: int) -> Cart | None:
        stmt = (
            select(CartRow)
            .where(CartRow.user_id == user_id)
            .options(selectinload(CartRow.items).selectinload(CartItemRow.product))
            .execution_options(populate_existing=True)
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def add(self, cart: Cart) -> None:
        row = CartRow(user_id=cart.user_id)
        self._session.add(row)
        self._session.flush()
        cart.id = row.id

    def save(self, cart: Cart) -> None:
        row = self._session.get(CartRow, cart.id)
        if row is None:
            raise NotFoundError("Cart not found")

        kept_ids = {line.id for line in cart.lines if line.id is not None}
        for item in list(row.items):
            if item.id not in kept_ids:
                row.items.remove(item)  # delete-orphan cascade issues the DELETE

        existing = {item.id: item for item in row.items}
        inserted: list[tuple[CartLine, CartItemRow]] = []
        for line in cart.lines:
            if line.id is None:
                item = CartItemRow(product_id=line.product_id, quantity=line.quantity)
                row.items.append(item)
                inserted.append((line, item))
            else:
                existing[line.id].quantity = line.quantity

        self._session.flush()
        for line, item in inserted:
            line.id = item.id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: CartRow) -> Cart:
        return Cart(
            id=row.id,
            user_id=row.user_id,
            lines=[
                CartLine(
                    id=item.id,
                    product=to_domain_product(item.product),
                    quantity=item.quantity,
                )
                for item in row.items
            ],
        )
