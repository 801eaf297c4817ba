"""
System Router

Health check endpoints:
- /health: Simple health for load balancers
- /api/v1/health: Same check, plus the loaded languages
"""

from fastapi import APIRouter, Depends

from welcome.api.deps import get_catalog
from welcome.i18n import Catalog

# Router for /api/v1 prefix
router = APIRouter()

# Router for root-level health endpoints
root_router = APIRouter()


@root_router.get("/health")
async def health():
    """Simple health check for load balancers."""
    return {"status": "ok"}


@router.get("/health")
async def health_api(catalog: Catalog = Depends(get_catalog)):
    """Health check with catalog summary."""
    return {
        "status": "ok",
        "languages": list(catalog.languages),
        "default_language": catalog.default_language,
    }
