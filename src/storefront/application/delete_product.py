"""Application service: Delete Product use case.

Orders that reference the product keep their snapshot; only the live
display fields disappear from their views.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.requester import Requester, Role
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, requester: Requester, product_id: str) -> None:
        require_role(requester, {Role.ADMIN})

        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError("Product not found")

        self._product_repo.delete(product_id)
        logger.info("Product deleted", product_id=product_id)
