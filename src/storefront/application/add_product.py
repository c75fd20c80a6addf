"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.product_view import to_product_dto
from storefront.domain.model.product import Product
from storefront.domain.model.requester import Requester, Role
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        requester: Requester,
        name: Any,
        description: Any,
        category: Any,
        price: Any,
        image: str | None = None,
        available: bool = True,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        require_role(requester, {Role.ADMIN})

        product = Product.create(
            product_id=None,
            name=name,
            description=description,
            category=category,
            price=price,
            image=image,
            available=available,
        )
        self._product_repo.save(product)

        logger.info("Product added", product_id=product.id, name=product.name)
        return to_product_dto(product)
