"""Tests for the catalog use cases."""

import pytest

from storefront.application.add_category import AddCategoryHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.list_categories import ListCategoriesHandler
from storefront.application.list_products import ListProductsHandler, ShowProductHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.restock_product import RestockProductHandler
from storefront.application.show_category import ShowCategoryHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import BadRequestError, NotFoundError
from tests.fakes import FakeUnitOfWork


def _setup():
    uow = FakeUnitOfWork()
    category = AddCategoryHandler(uow).handle("Gadgets", "Small electronics")
    return uow, category.id


class TestCategories:

    def test_add_and_list(self):
        uow, category_id = _setup()
        AddCategoryHandler(uow).handle("Books")
        categories = ListCategoriesHandler(uow).handle()
        assert [c.name for c in categories] == ["Gadgets", "Books"]
        assert categories[0].id == category_id
        assert categories[0].description == "Small electronics"

    def test_duplicate_name_rejected_case_insensitively(self):
        uow, _ = _setup()
        with pytest.raises(BadRequestError, match="already exists"):
            AddCategoryHandler(uow).handle("gadgets")

    def test_show_category_with_its_products(self):
        uow, category_id = _setup()
        AddProductHandler(uow).handle("Widget", "20.00", 5, category_id)
        detail = ShowCategoryHandler(uow).handle(category_id)
        assert detail.category.name == "Gadgets"
        assert detail.category.product_count == 1
        assert [p.name for p in detail.products] == ["Widget"]

    def test_show_unknown_category(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError, match="Category not found"):
            ShowCategoryHandler(uow).handle(999)

    def test_blank_name_rejected(self):
        uow, _ = _setup()
        with pytest.raises(BadRequestError, match="name is required"):
            AddCategoryHandler(uow).handle("   ")

    def test_product_count(self):
        uow, category_id = _setup()
        AddProductHandler(uow).handle("Widget", "20.00", 5, category_id)
        assert ListCategoriesHandler(uow).handle()[0].product_count == 1


class TestProducts:

    def test_add_product(self):
        uow, category_id = _setup()
        product = AddProductHandler(uow).handle("Widget", "19.999", 5, category_id)
        assert product.price == "$20.00"
        assert product.stock == 5
        assert product.category_name == "Gadgets"

    def test_add_product_unknown_category(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError, match="Category not found"):
            AddProductHandler(uow).handle("Widget", "20.00", 5, 999)

    def test_negative_stock_rejected(self):
        uow, category_id = _setup()
        with pytest.raises(BadRequestError, match="cannot be negative"):
            AddProductHandler(uow).handle("Widget", "20.00", -1, category_id)

    def test_negative_price_rejected(self):
        uow, category_id = _setup()
        with pytest.raises(BadRequestError):
            AddProductHandler(uow).handle("Widget", "-5", 1, category_id)

    def test_list_filters_by_category(self):
        uow, gadgets = _setup()
        books = AddCategoryHandler(uow).handle("Books").id
        AddProductHandler(uow).handle("Widget", "20.00", 5, gadgets)
        AddProductHandler(uow).handle("Novel", "9.00", 5, books)
        assert [p.name for p in ListProductsHandler(uow).handle()] == ["Widget", "Novel"]
        assert [p.name for p in ListProductsHandler(uow).handle(books)] == ["Novel"]

    def test_list_unknown_category(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError):
            ListProductsHandler(uow).handle(999)

    def test_show_unknown_product(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError, match="Product not found"):
            ShowProductHandler(uow).handle(999)

    def test_update_never_touches_stock(self):
        uow, category_id = _setup()
        books = AddCategoryHandler(uow).handle("Books").id
        product_id = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        product = UpdateProductHandler(uow).handle(
            product_id, name="Widget Pro", price="25.00", category_id=books
        )
        assert (product.name, product.price, product.category_name) == (
            "Widget Pro",
            "$25.00",
            "Books",
        )
        assert product.stock == 5

    def test_update_to_unknown_category(self):
        uow, category_id = _setup()
        product_id = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        with pytest.raises(NotFoundError, match="Category not found"):
            UpdateProductHandler(uow).handle(product_id, category_id=999)


class TestRestock:

    def test_restock_adds_to_stock(self):
        uow, category_id = _setup()
        product_id = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        product = RestockProductHandler(uow).handle(product_id, 7)
        assert product.stock == 12
        assert uow.stock_of(product_id) == 12

    def test_restock_requires_positive_quantity(self):
        uow, category_id = _setup()
        product_id = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        with pytest.raises(BadRequestError):
            RestockProductHandler(uow).handle(product_id, 0)

    def test_restock_unknown_product(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError):
            RestockProductHandler(uow).handle(999, 3)


class TestRemoveProduct:

    def test_remove_drops_cart_lines(self):
        uow, category_id = _setup()
        widget = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        gadget = AddProductHandler(uow).handle("Gadget", "5.00", 5, category_id).id
        AddToCartHandler(uow).handle(7, widget, 1)
        AddToCartHandler(uow).handle(7, gadget, 2)

        RemoveProductHandler(uow).handle(widget)

        assert widget not in uow.store.products
        assert uow.cart_lines_of(7) == [(gadget, 2)]

    def test_remove_unknown_product(self):
        uow, _ = _setup()
        with pytest.raises(NotFoundError, match="Product not found"):
            RemoveProductHandler(uow).handle(999)

    def test_ordered_product_is_kept(self):
        uow, category_id = _setup()
        widget = AddProductHandler(uow).handle("Widget", "20.00", 5, category_id).id
        AddToCartHandler(uow).handle(7, widget, 1)
        PlaceOrderHandler(uow).handle(7)

        with pytest.raises(BadRequestError, match="has orders and cannot be removed"):
            RemoveProductHandler(uow).handle(widget)
        assert uow.stock_of(widget) == 4
