from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from product_catalog.config.config import config
from product_catalog.config.logger_config import log
from product_catalog.infrastructure.store.product_store import ProductStore
from product_catalog.interfaces.http.errors import (
    CatalogHTTPException,
    catalog_exception_handler,
    unhandled_exception_handler,
)
from product_catalog.interfaces.http.product import router as product_router
from product_catalog.interfaces.http.schemas import HealthResponse
from product_catalog.observability.metrics import CATALOG_SIZE, create_metrics_endpoint
from product_catalog.observability.middleware import metrics_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan handler: runs on startup and shutdown.
    """
    log.info(
        "Starting product-service",
        env=config.ENV,
        products=app.state.product_store.size(),
    )
    yield
    # Store contents are not persisted.
    log.info("product-service shutdown complete")


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """
    Build the application.

    The store is created once here and shared by every request through
    `app.state`; pass one in to start from a different catalog.
    """
    app = FastAPI(
        title=config.SERVICE_NAME,
        description="Product catalog for the Lite platform",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.product_store = store if store is not None else ProductStore()
    CATALOG_SIZE.set_function(app.state.product_store.size)

    @app.get("/")
    def read_root():
        return {"message": "Hello from product-service!"}

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint for liveness probe."""
        return HealthResponse(
            status="healthy",
            service=config.SERVICE_NAME,
            products=request.app.state.product_store.size(),
        )

    app.middleware("http")(metrics_middleware)
    app.add_exception_handler(CatalogHTTPException, catalog_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(product_router)
    app.add_api_route(
        "/metrics", create_metrics_endpoint(), name="metrics", include_in_schema=False
    )

    return app


app = create_app()  # This is what Uvicorn needs to run
