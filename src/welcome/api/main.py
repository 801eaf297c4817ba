import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from welcome.core.config import settings
from welcome.i18n import MissingTranslationError, build_catalog
from welcome.api.routers import page, i18n_api, system
from welcome.api.templates import templates
from welcome.api.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from welcome.api.middleware.request_logging import RequestLoggingMiddleware
from welcome.api.metrics import router as metrics_router, MetricsMiddleware

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self';"
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog = app.state.catalog
    logger.info(
        "Welcome service started",
        extra={
            "environment": settings.ENVIRONMENT.value,
            "languages": list(catalog.languages),
        },
    )
    yield
    logger.info("Welcome service stopped")


# --- OpenAPI Metadata ---
app = FastAPI(
    lifespan=lifespan,
    title="Welcome",
    version="0.1.0",
    description="Welcome page with in-place language switching.",
    openapi_tags=[
        {"name": "ui", "description": "Web UI endpoints"},
        {"name": "i18n", "description": "Languages and language switching"},
        {"name": "system", "description": "Health checks"},
        {"name": "metrics", "description": "Prometheus metrics"},
    ],
    license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
)

# --- Translation Catalog (validated here so a broken table fails the boot) ---
app.state.catalog = build_catalog(settings)

# --- Rate Limiter ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# --- Middleware (order matters: last added = first executed) ---
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(MetricsMiddleware)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# --- Custom Error Handlers ---
@app.exception_handler(404)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """HTML 404 page for browsers, JSON for the API."""
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=404, content={"detail": exc.detail})
    return templates.TemplateResponse(request, "error/404.html", status_code=404)


@app.exception_handler(MissingTranslationError)
async def missing_translation_handler(request: Request, exc: MissingTranslationError):
    """Raised only when MISSING_KEY_POLICY=raise."""
    logger.error(
        "Missing translation",
        extra={"language": exc.language, "key": exc.key, "path": request.url.path},
    )
    return templates.TemplateResponse(request, "error/500.html", status_code=500)


app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

# Include Routers
# UI routes (no /api/v1 prefix)
app.include_router(page.router, tags=["ui"])
app.include_router(system.root_router, tags=["system"])

# API routes with /api/v1 prefix
app.include_router(system.router, prefix="/api/v1", tags=["system"])
app.include_router(i18n_api.router, prefix="/api/v1", tags=["i18n"])
app.include_router(metrics_router, prefix="/api/v1", tags=["metrics"])


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    uvicorn.run(
        "welcome.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
