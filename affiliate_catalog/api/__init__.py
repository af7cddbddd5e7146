"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from affiliate_catalog.api.auth import router as auth_router
from affiliate_catalog.api.health import router as health_router
from affiliate_catalog.api.products import router as products_router

__all__ = [
    "auth_router",
    "health_router",
    "products_router",
]
