"""Infrastructure interface exports."""

from infrastructure.interfaces.webhook_forwarder import WebhookForwarder

__all__ = ["WebhookForwarder"]
