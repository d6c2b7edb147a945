"""Tests for order status changes and cancellation."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import BadRequestError, InvalidTransitionError, NotFoundError
from storefront.domain.model.order import OrderStatus
from tests.fakes import FakeOrderRepository, FakeUnitOfWork

ALICE = 7
BOB = 8


def _setup():
    uow = FakeUnitOfWork()
    a = uow.seed_product("A", "20.00", 10)
    b = uow.seed_product("B", "5.00", 3)
    AddToCartHandler(uow).handle(ALICE, a.id, 2)
    AddToCartHandler(uow).handle(ALICE, b.id, 3)
    order = PlaceOrderHandler(uow).handle(ALICE)
    return uow, order.id, a.id, b.id


class ConcurrentlyCancelledOrders(FakeOrderRepository):
    """Another session cancels the order, restoring its stock, right after it is read."""

    def __init__(self, uow, restored_stock):
        super().__init__(uow)
        self._restored_stock = restored_stock
        self._raced = False

    def get_by_id(self, order_id):
        order = super().get_by_id(order_id)
        if order is not None and not self._raced:
            self._raced = True
            self._uow.commit_concurrent_status(order_id, OrderStatus.CANCELLED)
            for product_id, stock in self._restored_stock.items():
                self._uow.commit_concurrent_stock(product_id, stock)
        return order


class TestUpdateOrderStatus:

    def test_walks_the_happy_path(self):
        uow, order_id, a_id, _ = _setup()
        handler = UpdateOrderStatusHandler(uow)
        for status in (OrderStatus.CONFIRMED, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            assert handler.handle(order_id, status).status == status.value
        assert uow.stock_of(a_id) == 8

    def test_illegal_transition_leaves_order_alone(self):
        uow, order_id, _, _ = _setup()
        with pytest.raises(InvalidTransitionError, match="from PENDING to SHIPPED"):
            UpdateOrderStatusHandler(uow).handle(order_id, OrderStatus.SHIPPED)
        assert uow.store.orders[order_id].status == OrderStatus.PENDING

    def test_cancel_from_confirmed_restores_stock(self):
        uow, order_id, a_id, b_id = _setup()
        handler = UpdateOrderStatusHandler(uow)
        handler.handle(order_id, OrderStatus.CONFIRMED)
        order = handler.handle(order_id, OrderStatus.CANCELLED)
        assert order.status == "CANCELLED"
        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3

    def test_cancelled_order_cannot_be_cancelled_again(self):
        uow, order_id, _, b_id = _setup()
        handler = UpdateOrderStatusHandler(uow)
        handler.handle(order_id, OrderStatus.CANCELLED)
        with pytest.raises(InvalidTransitionError):
            handler.handle(order_id, OrderStatus.CANCELLED)
        assert uow.stock_of(b_id) == 3

    def test_unknown_order(self):
        uow, _, _, _ = _setup()
        with pytest.raises(NotFoundError, match="Order not found"):
            UpdateOrderStatusHandler(uow).handle(999, OrderStatus.CONFIRMED)


class TestCancelOrder:

    def test_cancel_pending_restores_exactly(self):
        uow, order_id, a_id, b_id = _setup()
        order = CancelOrderHandler(uow).handle(ALICE, order_id)
        assert order.status == "CANCELLED"
        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3

    def test_cannot_cancel_confirmed(self):
        uow, order_id, a_id, _ = _setup()
        UpdateOrderStatusHandler(uow).handle(order_id, OrderStatus.CONFIRMED)
        with pytest.raises(BadRequestError, match="Only pending orders can be cancelled"):
            CancelOrderHandler(uow).handle(ALICE, order_id)
        assert uow.stock_of(a_id) == 8
        assert uow.store.orders[order_id].status == OrderStatus.CONFIRMED

    def test_other_users_order_is_not_found(self):
        uow, order_id, a_id, _ = _setup()
        with pytest.raises(NotFoundError, match="Order not found"):
            CancelOrderHandler(uow).handle(BOB, order_id)
        assert uow.stock_of(a_id) == 8

    def test_failed_restore_rolls_back_status(self):
        uow, order_id, a_id, b_id = _setup()
        del uow.store.products[b_id]
        with pytest.raises(NotFoundError):
            CancelOrderHandler(uow).handle(ALICE, order_id)
        assert uow.store.orders[order_id].status == OrderStatus.PENDING
        assert uow.stock_of(a_id) == 8


class TestConcurrentCancellation:

    def test_customer_cancel_losing_the_race_restores_nothing(self):
        uow, order_id, a_id, b_id = _setup()
        uow.orders = ConcurrentlyCancelledOrders(uow, {a_id: 10, b_id: 3})

        with pytest.raises(BadRequestError, match="Only pending orders can be cancelled"):
            CancelOrderHandler(uow).handle(ALICE, order_id)

        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3
        assert uow.store.orders[order_id].status == OrderStatus.CANCELLED

    def test_admin_cancel_losing_the_race_restores_nothing(self):
        uow, order_id, a_id, b_id = _setup()
        uow.orders = ConcurrentlyCancelledOrders(uow, {a_id: 10, b_id: 3})

        with pytest.raises(InvalidTransitionError, match="from CANCELLED"):
            UpdateOrderStatusHandler(uow).handle(order_id, OrderStatus.CANCELLED)

        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3

    def test_status_write_checks_the_stored_status(self):
        uow, order_id, _, _ = _setup()
        order = uow.orders.get_by_id(order_id)
        uow.commit_concurrent_status(order_id, OrderStatus.CONFIRMED)

        order.transition_to(OrderStatus.CONFIRMED)
        with pytest.raises(InvalidTransitionError, match="from CONFIRMED to CONFIRMED"):
            uow.orders.save(order, expected_status=OrderStatus.PENDING)
