"""
Prometheus metrics for the product-service.
"""

from fastapi import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# === HTTP METRICS ===
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status",
    ["method", "endpoint", "status"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "Request duration in seconds",
    ["method", "endpoint"],
    # 1ms to 1s
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests", "Current active HTTP requests", ["method", "endpoint"]
)

EXCEPTION_COUNT = Counter(
    "http_exceptions_total",
    "Total number of exceptions raised by the service",
    ["exception_type", "method", "endpoint"],
)

# === BUSINESS METRICS ===
CATALOG_SIZE = Gauge("catalog_products", "Number of products currently stored", [])


def create_metrics_endpoint():
    """Create a /metrics endpoint for Prometheus."""

    async def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return metrics
