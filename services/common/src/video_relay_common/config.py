"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel, computed_field


class WebhookConfig(BaseModel, frozen=True):
    """Outbound webhook configuration."""

    url: str
    timeout_seconds: float = 30.0
    source_tag: str | None = "video-generator-app"

    @computed_field
    @property
    def is_configured(self) -> bool:
        """Returns True when a webhook URL has been supplied."""
        return bool(self.url.strip())
