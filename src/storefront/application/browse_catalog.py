"""Application services: public catalog queries."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.product_view import to_product_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        category: str | None = None,
        search: str | None = None,
        available: bool | None = None,
    ) -> list[ProductDTO]:
        products = self._product_repo.find(
            category=Category.parse(category) if category else None,
            search=search or None,
            available=available,
        )
        return [to_product_dto(p) for p in products]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return to_product_dto(product)


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return sorted(c.value for c in self._product_repo.distinct_categories())
