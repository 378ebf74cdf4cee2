"""httpx implementation of the WebhookForwarder interface."""

from typing import Any

import httpx
from video_relay_common.logging import setup_logging

from domain.models import ForwardResult, VideoRequest
from infrastructure.interfaces import WebhookForwarder

logger = setup_logging()

RATE_LIMITED_MESSAGE = "Too many requests"


class HttpxWebhookForwarder(WebhookForwarder):
    """Posts video requests to a webhook URL with a shared httpx client."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        source: str | None = None,
    ):
        self._client = client
        self._endpoint = endpoint
        self._source = source

    async def forward(
        self, payload: VideoRequest, request_id: str | None = None
    ) -> ForwardResult:
        body = self.build_body(payload, request_id)
        log_extra = {"request_id": request_id, "topic": payload.topic}

        try:
            response = await self._client.post(self._endpoint, json=body)
        except httpx.RequestError as e:
            # also covers DecodingError and TooManyRedirects
            logger.exception("Webhook request failed", extra=log_extra)
            return ForwardResult.failed(str(e) or type(e).__name__)

        log_extra["status_code"] = response.status_code

        if response.status_code == 429:
            logger.warning("Webhook rate limited the request", extra=log_extra)
            return ForwardResult.failed(
                RATE_LIMITED_MESSAGE, status_code=429, rate_limited=True
            )

        if not response.is_success:
            logger.error("Webhook returned an error status", extra=log_extra)
            return ForwardResult.failed(
                f"HTTP Error: {response.status_code}",
                status_code=response.status_code,
            )

        logger.info("Request forwarded to webhook", extra=log_extra)
        return ForwardResult.ok(_parse_body(response), response.status_code)

    def build_body(
        self, payload: VideoRequest, request_id: str | None = None
    ) -> dict[str, Any]:
        """Returns the JSON body sent upstream."""
        body = payload.model_dump(mode="json")
        if self._source:
            body["source"] = self._source
        if request_id:
            body["requestId"] = request_id
        return body


def _parse_body(response: httpx.Response) -> Any:
    """Parses a JSON body, falling back to the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text
