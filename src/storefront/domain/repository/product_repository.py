"""Abstract repositories for the catalog aggregates.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Category, Product


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return a category by name, compared case-insensitively, or None."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category, ordered by ID."""

    @abstractmethod
    def count_products(self, category_id: int) -> int:
        """Return how many products belong to the category."""

    @abstractmethod
    def add(self, category: Category) -> None:
        """Persist a new category and assign its ID."""


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, category_id: int | None = None) -> list[Product]:
        """Return every product, optionally restricted to one category."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product, including its initial stock, and assign its ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist name, price and category changes.

        Never writes ``stock``; stock only moves through the InventoryLedger.
        """

    @abstractmethod
    def remove(self, product_id: int) -> None:
        """Delete the product; cart lines holding it go with it.

        Raises NotFoundError when the product does not exist.
        """
