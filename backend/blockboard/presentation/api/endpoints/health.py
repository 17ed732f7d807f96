"""Health check endpoint: no authentication, no database access."""

from fastapi import APIRouter, Depends

from blockboard.application.schemas import ResponseEnvelope
from blockboard.infrastructure.container import AppContainer
from blockboard.infrastructure.dependencies import get_container

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ResponseEnvelope[dict])
async def health_check(
    container: AppContainer = Depends(get_container),
) -> ResponseEnvelope[dict]:
    """Returns the current application health status."""
    settings = container.settings
    return ResponseEnvelope[dict].success(
        data={
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.app_env,
        },
        message="OK",
    )
