"""Unit tests for the InventoryAllocationService domain service."""

import pytest

from storefront.domain.exceptions import InsufficientStockError, NotFoundError
from storefront.domain.model.order import Order
from storefront.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)
from tests.fakes import FakeUnitOfWork


def _setup(stock_a: int = 10, stock_b: int = 3):
    uow = FakeUnitOfWork()
    a = uow.seed_product("A", "20.00", stock_a)
    b = uow.seed_product("B", "5.00", stock_b)
    uow.store.carts[7] = (100, [(101, a.id, 2), (102, b.id, 3)])
    cart = uow.carts.get_by_user_id(7)
    return uow, cart, a.id, b.id


class TestVerifyCart:

    def test_passes_when_everything_is_in_stock(self):
        uow, cart, _, _ = _setup()
        InventoryAllocationService(uow.inventory).verify_cart(cart)

    def test_names_the_short_product(self):
        uow, cart, _, _ = _setup(stock_b=2)
        with pytest.raises(InsufficientStockError, match="Insufficient stock for product: B"):
            InventoryAllocationService(uow.inventory).verify_cart(cart)

    def test_does_not_touch_stock(self):
        uow, cart, a_id, b_id = _setup()
        InventoryAllocationService(uow.inventory).verify_cart(cart)
        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3


class TestAllocateAndRestore:

    def test_allocate_decrements_each_line(self):
        uow, cart, a_id, b_id = _setup()
        order = Order.place(cart)
        InventoryAllocationService(uow.inventory).allocate_for_order(order)
        assert uow.stock_of(a_id) == 8
        assert uow.stock_of(b_id) == 0

    def test_restore_is_exact_inverse(self):
        uow, cart, a_id, b_id = _setup()
        order = Order.place(cart)
        svc = InventoryAllocationService(uow.inventory)
        svc.allocate_for_order(order)
        svc.restore_for_order(order)
        assert uow.stock_of(a_id) == 10
        assert uow.stock_of(b_id) == 3

    def test_allocate_surfaces_insufficient_stock(self):
        uow, cart, _, b_id = _setup()
        order = Order.place(cart)
        uow.commit_concurrent_stock(b_id, 2)
        with pytest.raises(InsufficientStockError):
            InventoryAllocationService(uow.inventory).allocate_for_order(order)

    def test_restore_for_missing_product_fails(self):
        uow, cart, a_id, _ = _setup()
        order = Order.place(cart)
        del uow.store.products[a_id]
        with pytest.raises(NotFoundError):
            InventoryAllocationService(uow.inventory).restore_for_order(order)
