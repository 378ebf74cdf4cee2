"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel, Field
from video_relay_common import WebhookConfig


class ValidationConfig(BaseModel, frozen=True):
    """Request validation limits."""

    min_topic_length: int = Field(default=2, ge=1)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    environment: str = "development"
    version: str = "1.0.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    webhook: WebhookConfig
    validation: ValidationConfig

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        environment=os.getenv("ENVIRONMENT", "development"),
        version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        webhook=WebhookConfig(
            url=os.getenv("MAKE_WEBHOOK_URL", ""),
            timeout_seconds=float(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "30")),
            source_tag=os.getenv("WEBHOOK_SOURCE_TAG", "video-generator-app") or None,
        ),
        validation=ValidationConfig(
            min_topic_length=int(os.getenv("MIN_TOPIC_LENGTH", "2")),
        ),
    )
