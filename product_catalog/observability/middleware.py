"""
FastAPI middleware for Prometheus metrics collection.
"""

import re
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from product_catalog.observability.metrics import (
    ACTIVE_REQUESTS,
    EXCEPTION_COUNT,
    REQUEST_COUNT,
    REQUEST_DURATION,
)

PRODUCTS_PATH = "/api/product/products"
UNMATCHED_PATH = "/{unmatched}"

_KNOWN_PATHS = frozenset(
    {"/", "/health", "/metrics", "/docs", "/redoc", "/openapi.json", PRODUCTS_PATH}
)
_PRODUCT_ID_PATH = re.compile(r"^/api/product/products/[^/]+$")


def normalize_path(path: str) -> str:
    """Map a request path onto a fixed set of endpoint labels."""
    if path in _KNOWN_PATHS:
        return path
    if _PRODUCT_ID_PATH.match(path):
        return f"{PRODUCTS_PATH}/{{id}}"
    return UNMATCHED_PATH


async def metrics_middleware(
    request: Request, call_next: Callable[..., Awaitable[Response]]
) -> Response:
    """
    Middleware to collect HTTP request metrics.

    Tracks:
    - Request count
    - Request duration
    - Active requests
    - Exceptions (by type)
    """
    method = request.method
    path = normalize_path(request.url.path)

    ACTIVE_REQUESTS.labels(method=method, endpoint=path).inc()
    start_time = time.perf_counter()
    status_code = 500

    try:
        response = await call_next(request)
        status_code = response.status_code
    except Exception as e:
        EXCEPTION_COUNT.labels(
            exception_type=type(e).__name__, method=method, endpoint=path
        ).inc()
        raise
    finally:
        duration = time.perf_counter() - start_time
        ACTIVE_REQUESTS.labels(method=method, endpoint=path).dec()
        REQUEST_COUNT.labels(
            method=method, endpoint=path, status=str(status_code)
        ).inc()
        REQUEST_DURATION.labels(method=method, endpoint=path).observe(duration)

    return response
