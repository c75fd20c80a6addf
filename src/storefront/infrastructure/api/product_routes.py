"""FastAPI routes for the catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.application.add_product import AddProductHandler
from storefront.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.seed_products import SeedProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.model.requester import Requester, Role
from storefront.infrastructure.api.dependencies import get_store, requester_with_role
from storefront.infrastructure.api.responses import envelope
from storefront.infrastructure.api.schemas import CreateProductRequest, UpdateProductRequest
from storefront.infrastructure.bootstrap import Store

product_router = APIRouter(prefix="/api/products", tags=["products"])

admin_only = requester_with_role(Role.ADMIN)


# --- Public -------------------------------------------------------------------


@product_router.get("")
def list_products(
    category: str | None = None,
    search: str | None = None,
    available: bool | None = None,
    store: Store = Depends(get_store),
) -> JSONResponse:
    products = ListProductsHandler(store.products).handle(
        category=category, search=search, available=available
    )
    return envelope([p.to_dict() for p in products], count=len(products))


@product_router.get("/categories")
def list_categories(store: Store = Depends(get_store)) -> JSONResponse:
    return envelope(ListCategoriesHandler(store.products).handle())


@product_router.get("/{product_id}")
def get_product(product_id: str, store: Store = Depends(get_store)) -> JSONResponse:
    return envelope(ShowProductHandler(store.products).handle(product_id).to_dict())


# --- Admin --------------------------------------------------------------------


@product_router.post("/seed", status_code=201)
def seed_products(
    requester: Requester = Depends(admin_only),
    store: Store = Depends(get_store),
) -> JSONResponse:
    """Replace the catalog with the demo menu.

    Admin only, never public: seeding wipes every product.
    """
    products = SeedProductsHandler(store.products).handle(requester)
    return envelope(
        [p.to_dict() for p in products],
        status_code=201,
        count=len(products),
        message="Products seeded successfully",
    )


@product_router.post("", status_code=201)
def create_product(
    body: CreateProductRequest,
    requester: Requester = Depends(admin_only),
    store: Store = Depends(get_store),
) -> JSONResponse:
    dto = AddProductHandler(store.products).handle(requester, **body.model_dump())
    return envelope(dto.to_dict(), status_code=201)


@product_router.put("/{product_id}")
def update_product(
    product_id: str,
    body: UpdateProductRequest,
    requester: Requester = Depends(admin_only),
    store: Store = Depends(get_store),
) -> JSONResponse:
    changes = body.model_dump(exclude_unset=True)
    dto = UpdateProductHandler(store.products).handle(requester, product_id, **changes)
    return envelope(dto.to_dict())


@product_router.delete("/{product_id}")
def delete_product(
    product_id: str,
    requester: Requester = Depends(admin_only),
    store: Store = Depends(get_store),
) -> JSONResponse:
    DeleteProductHandler(store.products).handle(requester, product_id)
    return envelope(message="Product deleted successfully")
