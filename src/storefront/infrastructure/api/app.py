"""Storefront FastAPI application.

Usage:
    uvicorn storefront.infrastructure.api.app:app --host 0.0.0.0 --port 5000

Settings are read from the environment (see ``infrastructure.config``).
The store is opened lazily on the first request that needs it.
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.infrastructure.api.errors import install_error_handlers
from storefront.infrastructure.api.order_routes import order_router
from storefront.infrastructure.api.product_routes import product_router
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings)

    app = FastAPI(
        title="Storefront API",
        description="Menu, ordering and sales reporting",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Tag every log line written during the request."""
        clear_request_context()
        bind_request_context(
            request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    install_error_handlers(app, settings)
    app.include_router(order_router)
    app.include_router(product_router)

    @app.get("/api/health")
    async def health() -> JSONResponse:
        return JSONResponse(
            content={"status": "OK", "message": "Storefront API is running"}
        )

    return app


app = create_app()
