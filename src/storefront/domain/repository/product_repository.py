"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find(
        self,
        category: Category | None = None,
        search: str | None = None,
        available: bool | None = None,
    ) -> list[Product]:
        """Return matching products, newest first.

        ``search`` is a case-insensitive substring match on the name.
        """

    @abstractmethod
    def distinct_categories(self) -> list[Category]:
        """Return the categories in use, without duplicates."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product.

        A product without an ID is new and receives the next one.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product from the catalog."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Drop the whole catalog and store ``products`` in its place."""
