"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from affiliate_catalog.catalog.service import CatalogService, get_catalog_service
from affiliate_catalog.domain.exceptions import StorageUnavailable

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from affiliate_catalog.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="affiliate-catalog",
        version=settings.api_version,
    )


@router.get("/ready")
def readiness_check(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> JSONResponse:
    """Check that the product store can be read.

    Returns:
        Readiness status, 503 if the store is unreadable.
    """
    try:
        count = len(service.list_products())
    except StorageUnavailable as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "reason": e.reason},
        )

    return JSONResponse(content={"status": "ready", "products": count})
