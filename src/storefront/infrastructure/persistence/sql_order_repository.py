"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from storefront.domain.exceptions import InvalidTransitionError, NotFoundError
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.orm import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        row = OrderRow(
            user_id=order.user_id,
            status=order.status.value,
            total=order.total.amount,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemRow(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.price.amount,
                )
                for line in order.items
            ],
        )
        self._session.add(row)
        self._session.flush()

        order.id = row.id
        order.items = [
            replace(line, id=item.id) for line, item in zip(order.items, row.items)
        ]

    def get_by_id(self, order_id: int) -> Order | None:
        stmt = self._select().where(OrderRow.id == order_id)
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def get_for_user(self, user_id: int, order_id: int) -> Order | None:
        stmt = self._select().where(OrderRow.id == order_id, OrderRow.user_id == user_id)
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_for_user(self, user_id: int) -> list[Order]:
        stmt = self._select().where(OrderRow.user_id == user_id).order_by(*self._newest_first())
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def list_all(self) -> list[Order]:
        stmt = self._select().order_by(*self._newest_first())
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def save(self, order: Order, expected_status: OrderStatus) -> None:
        stmt = (
            update(OrderRow)
            .where(OrderRow.id == order.id, OrderRow.status == expected_status.value)
            .values(status=order.status.value, updated_at=order.updated_at)
            .execution_options(synchronize_session=False)
        )
        if self._session.execute(stmt).rowcount == 1:
            return

        current = self._session.execute(
            select(OrderRow.status).where(OrderRow.id == order.id)
        ).scalar_one_or_none()
        if current is None:
            raise NotFoundError("Order not found")
        raise InvalidTransitionError(OrderStatus(current), order.status)

    def exists_for_product(self, product_id: int) -> bool:
        stmt = select(OrderItemRow.id).where(OrderItemRow.product_id == product_id).limit(1)
        return self._session.execute(stmt).first() is not None

    # --- Query helpers --------------------------------------------------------

    @staticmethod
    def _select():
        return (
            select(OrderRow)
            .options(selectinload(OrderRow.items))
            .execution_options(populate_existing=True)
        )

    @staticmethod
    def _newest_first():
        return OrderRow.created_at.desc(), OrderRow.id.desc()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            total=Money(Decimal(row.total)),
            items=[
                OrderLine(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=Money(Decimal(item.price)),
                )
                for item in row.items
            ],
            status=OrderStatus(row.status),
            shipping_address=row.shipping_address,
            billing_address=row.billing_address,
            notes=row.notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
