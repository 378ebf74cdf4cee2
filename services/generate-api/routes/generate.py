"""Video generation relay endpoint."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends
from video_relay_common.logging import setup_logging

from config import AppConfig
from dependencies import get_config, get_forwarder
from domain import build_video_request
from exceptions import WebhookForwardingError, WebhookNotConfiguredError
from infrastructure.interfaces import WebhookForwarder
from request_models import GenerateRequest
from response_models import (
    ErrorResponse,
    GenerateData,
    GenerateResponse,
    VideoData,
)

logger = setup_logging()

router = APIRouter(tags=["generate"])

ConfigDep = Annotated[AppConfig, Depends(get_config)]
ForwarderDep = Annotated[WebhookForwarder, Depends(get_forwarder)]


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_video(
    body: GenerateRequest,
    config: ConfigDep,
    forwarder: ForwarderDep,
) -> GenerateResponse:
    """
    Validates a video generation request and relays it to the webhook.

    Validation failures surface as 400. A missing webhook URL and forwarding
    failures surface as 500. Both go through the exception handlers
    registered in ``main``.
    """
    video_request = build_video_request(
        body.model_dump(),
        min_topic_length=config.validation.min_topic_length,
    )
    if not config.webhook.is_configured:
        raise WebhookNotConfiguredError()

    request_id = f"req_{uuid.uuid4().hex}"

    logger.info(
        "Received video generation request",
        extra={
            "request_id": request_id,
            "topic": video_request.topic,
            "style": video_request.style,
            "duration": video_request.duration,
        },
    )

    result = await forwarder.forward(video_request, request_id=request_id)
    if not result.success:
        raise WebhookForwardingError(
            result.error,
            status_code=result.status_code,
            rate_limited=result.rate_limited,
        )

    return GenerateResponse(
        message="Video generation request sent successfully",
        data=GenerateData(
            request_id=request_id,
            video_data=VideoData(
                **video_request.model_dump(),
                source=config.webhook.source_tag,
            ),
            webhook_response=result.payload,
        ),
    )
