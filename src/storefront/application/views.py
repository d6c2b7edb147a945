"""Read-side helpers shared by the cart and order use cases.

Every cart mutation answers with a freshly re-read cart, and every
order answer joins in the current product and category names; both are
built here so the handlers stay focused on their own rules.
"""

from __future__ import annotations

from storefront.application.dto import (
    CartDTO,
    CartItemDTO,
    CategoryDTO,
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Category, Product
from storefront.domain.repository.unit_of_work import UnitOfWork


def get_or_create_cart(uow: UnitOfWork, user_id: int) -> Cart:
    """Return the user's cart, creating an empty one on first access."""
    cart = uow.carts.get_by_user_id(user_id)
    if cart is None:
        cart = Cart.empty_for(user_id)
        uow.carts.add(cart)
    return cart


def load_cart_view(uow: UnitOfWork, user_id: int) -> CartDTO:
    """Re-read the cart from the repository and render it."""
    return cart_to_dto(get_or_create_cart(uow, user_id))


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        id=cart.id,  # type: ignore[arg-type]
        user_id=cart.user_id,
        items=[
            CartItemDTO(
                id=line.id,  # type: ignore[arg-type]
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=str(line.product.price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        total_items=cart.total_items,
        total_price=str(cart.total_price),
    )


def order_to_dto(uow: UnitOfWork, order: Order) -> OrderDTO:
    items: list[OrderItemDTO] = []
    for line in order.items:
        product = uow.products.get_by_id(line.product_id)
        category = uow.categories.get_by_id(product.category_id) if product else None
        items.append(
            OrderItemDTO(
                id=line.id,  # type: ignore[arg-type]
                product_id=line.product_id,
                product_name=product.name if product else None,
                category_name=category.name if category else None,
                quantity=line.quantity,
                price=str(line.price),
                line_total=str(line.line_total),
            )
        )

    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        total=str(order.total),
        shipping_address=order.shipping_address,
        billing_address=order.billing_address,
        notes=order.notes,
        items=items,
        total_items=order.total_items,
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def product_to_dto(uow: UnitOfWork, product: Product) -> ProductDTO:
    category = uow.categories.get_by_id(product.category_id)
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=str(product.price),
        stock=product.stock,
        category_id=product.category_id,
        category_name=category.name if category else None,
    )


def category_to_dto(uow: UnitOfWork, category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        product_count=uow.categories.count_products(category.id),  # type: ignore[arg-type]
    )
