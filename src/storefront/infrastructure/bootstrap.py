"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and receives the store
explicitly rather than looking it up.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Store:
    """The process-wide handle on the backing store."""

    settings: Settings
    products: ProductRepository
    orders: OrderRepository
    users: UserRepository


_store: Store | None = None


def open_store(settings: Settings | None = None) -> Store:
    """Open the store once; later calls return the same handle.

    A call with different settings (a new data directory, say) reopens it.
    """
    global _store
    settings = settings or Settings.from_env()
    if _store is not None and _store.settings == settings:
        return _store

    data_dir = settings.data_dir
    _store = Store(
        settings=settings,
        products=JsonProductRepository(data_dir / "products.json"),
        orders=JsonOrderRepository(data_dir / "orders.json"),
        users=JsonUserRepository(data_dir / "users.json"),
    )
    logger.debug("Store opened", data_dir=str(data_dir))
    return _store


def close_store() -> None:
    global _store
    _store = None
