"""Health check router

Provides health check endpoints for monitoring and service discovery.

Endpoints:
- GET /v1/healthcheck: Service health status and metadata

Health Check Philosophy:
- Always HTTP 200, even when the reported status is DOWN; monitors must be
  able to read the body of a degraded service
- Rich response model (not generic dict)
- Never cached by intermediaries
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from ...service import HealthService
from ..contracts import HealthResponse
from ..deps import get_health_service

HEALTHCHECK_PATH = "/v1/healthcheck"

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    response: Response,
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthResponse:
    """API health check"""
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    return HealthResponse.from_status(service.get_basic_status())
