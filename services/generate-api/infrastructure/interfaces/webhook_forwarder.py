"""Abstract interface for relaying requests to an external webhook."""

from abc import ABC, abstractmethod

from domain.models import ForwardResult, VideoRequest


class WebhookForwarder(ABC):
    """Abstract base class for webhook forwarders."""

    @abstractmethod
    async def forward(
        self, payload: VideoRequest, request_id: str | None = None
    ) -> ForwardResult:
        """
        Sends a normalized request to the webhook in a single call.

        Args:
            payload: The validated video request.
            request_id: Optional identifier added to the outbound body.

        Returns:
            ForwardResult describing the upstream outcome. Failures are
            reported in the result, not raised.
        """
        pass
