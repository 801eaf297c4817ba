# Prometheus Metrics for FastAPI
# Provides /metrics endpoint for scraping

import time

from prometheus_client import (
    Counter,
    Histogram,
    Gauge,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from fastapi import APIRouter, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

router = APIRouter()

# --- Metrics Definitions ---

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status"]
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

ACTIVE_REQUESTS = Gauge("http_requests_active", "Number of active HTTP requests")

LANGUAGE_SWITCHES = Counter(
    "language_switch_total",
    "Language switch requests",
    ["language", "outcome"],  # outcome: "accepted" or "ignored"
)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect request metrics."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path.endswith("/metrics"):
            return await call_next(request)

        ACTIVE_REQUESTS.inc()
        start_time = time.time()

        try:
            response = await call_next(request)

            duration = time.time() - start_time
            path = self._normalize_path(request.url.path)

            REQUEST_COUNT.labels(
                method=request.method, path=path, status=response.status_code
            ).inc()
            REQUEST_LATENCY.labels(method=request.method, path=path).observe(duration)

            return response
        finally:
            ACTIVE_REQUESTS.dec()

    def _normalize_path(self, path: str) -> str:
        """Normalize path to reduce cardinality."""
        if path.startswith("/static/"):
            return "/static/*"
        if path.startswith("/api/v1/i18n/") and path not in (
            "/api/v1/i18n/languages",
            "/api/v1/i18n/language",
        ):
            return "/api/v1/i18n/{language}"
        return path


@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def record_language_switch(requested: str, accepted: bool):
    """Record a language switch attempt. Unsupported codes share one label."""
    LANGUAGE_SWITCHES.labels(
        language=requested if accepted else "unsupported",
        outcome="accepted" if accepted else "ignored",
    ).inc()
