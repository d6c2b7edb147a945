"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import BadRequestError, InsufficientStockError, NotFoundError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def _product(product_id: int = 1, name: str = "Widget", price: str = "20.00", stock: int = 10) -> Product:
    return Product(id=product_id, name=name, price=Money.of(price), stock=stock, category_id=1)


def _cart_with(*lines: tuple[int, Product, int]) -> Cart:
    """Build a cart from (line_id, product, quantity) tuples."""
    return Cart(
        id=1,
        user_id=7,
        lines=[CartLine(id=line_id, product=p, quantity=q) for line_id, p, q in lines],
    )


class TestCartAdd:

    def test_add_creates_line(self):
        cart = Cart.empty_for(7)
        line = cart.add(_product(), 2)
        assert line.quantity == 2
        assert line.id is None
        assert len(cart.lines) == 1

    def test_add_merges_with_existing_line(self):
        cart = _cart_with((10, _product(stock=5), 2))
        line = cart.add(_product(stock=5), 3)
        assert line.id == 10
        assert line.quantity == 5
        assert len(cart.lines) == 1

    def test_prospective_total_exceeding_stock_rejected(self):
        """Existing 2 + requested 3 = 5 > stock 4."""
        cart = _cart_with((10, _product(stock=4), 2))
        with pytest.raises(InsufficientStockError, match="Widget"):
            cart.add(_product(stock=4), 3)
        assert cart.lines[0].quantity == 2

    def test_add_more_than_stock_rejected(self):
        cart = Cart.empty_for(7)
        with pytest.raises(InsufficientStockError) as excinfo:
            cart.add(_product(stock=1), 2)
        assert excinfo.value.requested == 2
        assert excinfo.value.available == 1
        assert cart.is_empty

    def test_add_zero_rejected(self):
        with pytest.raises(BadRequestError, match="must be positive"):
            Cart.empty_for(7).add(_product(), 0)


class TestCartUpdateAndRemove:

    def test_update_is_absolute(self):
        cart = _cart_with((10, _product(), 2))
        cart.update(10, 7)
        assert cart.lines[0].quantity == 7

    def test_update_beyond_stock_rejected(self):
        cart = _cart_with((10, _product(stock=3), 2))
        with pytest.raises(InsufficientStockError):
            cart.update(10, 4)
        assert cart.lines[0].quantity == 2

    def test_update_unknown_line_not_found(self):
        cart = _cart_with((10, _product(), 2))
        with pytest.raises(NotFoundError, match="Cart item not found"):
            cart.update(99, 1)

    def test_remove_line(self):
        cart = _cart_with((10, _product(), 2), (11, _product(2, "Gadget"), 1))
        cart.remove(10)
        assert [line.id for line in cart.lines] == [11]

    def test_remove_unknown_line_not_found(self):
        with pytest.raises(NotFoundError):
            Cart.empty_for(7).remove(1)

    def test_clear(self):
        cart = _cart_with((10, _product(), 2))
        cart.clear()
        cart.clear()
        assert cart.is_empty


class TestCartTotals:

    def test_totals_use_current_prices(self):
        a = _product(1, "A", price="20.00", stock=10)
        b = _product(2, "B", price="5.00", stock=3)
        cart = _cart_with((10, a, 2), (11, b, 3))
        assert cart.total_items == 5
        assert cart.total_price == Money.of("55.00")

        a.update_price(Money.of("25.00"))
        assert cart.total_price == Money.of("65.00")

    def test_empty_cart_totals(self):
        cart = Cart.empty_for(7)
        assert cart.total_items == 0
        assert cart.total_price == Money.zero()
