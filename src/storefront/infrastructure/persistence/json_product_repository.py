"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import DEFAULT_IMAGE, Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._next_id_from(self._load())

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find(
        self,
        category: Category | None = None,
        search: str | None = None,
        available: bool | None = None,
    ) -> list[Product]:
        needle = search.lower() if search else None
        matches = [
            p
            for p in self._load().values()
            if (category is None or p.category == category)
            and (needle is None or needle in p.name.lower())
            and (available is None or p.available == available)
        ]
        return sorted(matches, key=lambda p: p.created_at, reverse=True)

    def distinct_categories(self) -> list[Category]:
        seen: dict[Category, None] = {}
        for product in self._load().values():
            seen.setdefault(product.category, None)
        return list(seen)

    def save(self, product: Product) -> None:
        with self._file.lock:
            products = self._load()
            if product.id is None:
                product.id = self._next_id_from(products)
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> None:
        with self._file.lock:
            products = self._load()
            products.pop(product_id, None)
            self._persist(products)

    def replace_all(self, products: list[Product]) -> None:
        self._persist({p.id: p for p in products})

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _next_id_from(products: dict[str, Product]) -> str:
        return str(max((int(pid) for pid in products), default=0) + 1)

    def _load(self) -> dict[str, Product]:
        raw = self._file.read()
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                description=item["description"],
                category=Category(item["category"]),
                price=Money(Decimal(item["price"]), item.get("currency", "GBP")),
                image=item.get("image") or DEFAULT_IMAGE,
                available=item.get("available", True),
                created_at=datetime.fromisoformat(item["created_at"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "category": p.category.value,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "image": p.image,
                "available": p.available,
                "created_at": p.created_at.isoformat(),
            }
            for p in products.values()
        ]
        self._file.write(raw)

