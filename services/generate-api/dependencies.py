"""FastAPI dependency injection configuration."""

from typing import Annotated

import httpx
from fastapi import Depends
from video_relay_common.logging import setup_logging

from config import AppConfig, load_config
from infrastructure import HttpxWebhookForwarder
from infrastructure.interfaces import WebhookForwarder

_config = load_config()

logger = setup_logging(_config.log_level)

_http_client = httpx.AsyncClient(timeout=_config.webhook.timeout_seconds)

if not _config.webhook.is_configured:
    logger.warning("MAKE_WEBHOOK_URL is not set, /generate will fail")


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_forwarder(
    config: Annotated[AppConfig, Depends(get_config)],
) -> WebhookForwarder:
    """
    Returns the webhook forwarder for the configured URL.

    The route checks ``config.webhook.is_configured`` after validating the
    request, so an unconfigured webhook never masks field errors.
    """
    return HttpxWebhookForwarder(
        _http_client, config.webhook.url, config.webhook.source_tag
    )


async def close_http_client() -> None:
    """Closes the shared outbound HTTP client."""
    await _http_client.aclose()
    logger.info("Outbound HTTP client closed")
