from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from profile_service.application.dtos.common_dto import HealthResponse, ReadinessResponse
from profile_service.infrastructure.api.dependencies import get_profile_repo
from profile_service.infrastructure.database.repositories.profile_repository import ProfileRepository

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health Check",
    description="Liveness probe. Returns 200 whenever the process is up.",
)
def health():
    """Check API health status."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness Check",
    description="Readiness probe. Returns 503 when the storage backend cannot be reached.",
    responses={503: {"description": "Service Unavailable - Storage unreachable"}},
)
def ready(profiles: ProfileRepository = Depends(get_profile_repo)):
    """Check storage connectivity."""
    if not profiles.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "storage": profiles.backend},
        )
    return {"status": "ready", "storage": profiles.backend}
