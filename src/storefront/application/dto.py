"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is rendered as
formatted strings (e.g. "$15.00"), timestamps as ISO-8601.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutDetails:
    """Input: optional free-text fields copied onto a new order."""

    shipping_address: str | None = None
    billing_address: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str
    description: str | None
    product_count: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str
    stock: int
    category_id: int
    category_name: str | None


@dataclass(frozen=True)
class CategoryDetailDTO:
    category: CategoryDTO
    products: list[ProductDTO]


@dataclass(frozen=True)
class CartItemDTO:
    """Output: one cart line at the product's current price."""

    id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    id: int
    user_id: int
    items: list[CartItemDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: one order line at its locked checkout price.

    Product and category names are the *current* catalog data; they are
    None if the product has since disappeared.
    """

    id: int
    product_id: int
    product_name: str | None
    category_name: str | None
    quantity: int
    price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int
    status: str
    total: str
    shipping_address: str | None
    billing_address: str | None
    notes: str | None
    items: list[OrderItemDTO]
    total_items: int
    created_at: str
    updated_at: str
