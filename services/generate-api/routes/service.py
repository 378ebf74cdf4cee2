"""Service metadata endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from config import AppConfig
from dependencies import get_config
from response_models import HealthResponse, ServiceInfoResponse

router = APIRouter(tags=["service"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]


@router.get("/", response_model=ServiceInfoResponse)
def service_info(config: ConfigDep) -> ServiceInfoResponse:
    """Describes the API and its endpoints."""
    return ServiceInfoResponse(
        message="Video Generator API Server",
        version=config.version,
        endpoints={
            "generate": "POST /generate",
            "health": "GET /health",
        },
    )


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep) -> HealthResponse:
    """Reports liveness and whether the webhook is configured."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        environment=config.environment,
        webhook_configured=config.webhook.is_configured,
    )
