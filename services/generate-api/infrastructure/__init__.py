"""Concrete implementations of infrastructure interfaces."""

from .httpx_forwarder import HttpxWebhookForwarder

__all__ = ["HttpxWebhookForwarder"]
