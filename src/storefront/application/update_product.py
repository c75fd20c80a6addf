"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.product_view import to_product_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.requester import Requester, Role
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, requester: Requester, product_id: str, **changes: Any) -> ProductDTO:
        """Apply a partial update to a product.

        This does NOT affect any existing orders; they captured a
        name and price snapshot at creation time.
        """
        require_role(requester, {Role.ADMIN})

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        product.update(**changes)
        self._product_repo.save(product)

        logger.info("Product updated", product_id=product.id, fields=sorted(changes))
        return to_product_dto(product)
