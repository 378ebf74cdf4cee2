"""Response models for the generate-api."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from domain.models import Duration


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoData(CamelModel):
    """The normalized request as sent to the webhook."""

    topic: str
    style: str
    duration: Duration
    timestamp: str
    source: str | None = None


class GenerateData(CamelModel):
    request_id: str
    video_data: VideoData
    webhook_response: Any = None


class GenerateResponse(CamelModel):
    """Response returned after the request was relayed."""

    success: bool = True
    message: str
    data: GenerateData


class ErrorResponse(CamelModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: str
    errors: list[str] | None = None
    rate_limited: bool | None = None
    path: str | None = None
    details: str | None = None


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    environment: str
    webhook_configured: bool


class ServiceInfoResponse(CamelModel):
    message: str
    version: str
    endpoints: dict[str, str]
