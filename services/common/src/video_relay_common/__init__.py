from video_relay_common.config import WebhookConfig
from video_relay_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "WebhookConfig",
]
