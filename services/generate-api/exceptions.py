"""Custom exceptions for the generate-api service."""


class InvalidVideoRequestError(Exception):
    """Raised when a submitted video request fails field validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors) or "Invalid video request")


class WebhookForwardingError(Exception):
    """Raised when relaying a request to the webhook fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limited: bool = False,
    ):
        self.status_code = status_code
        self.rate_limited = rate_limited
        super().__init__(message)


class WebhookNotConfiguredError(Exception):
    """Raised when no webhook URL has been configured."""

    def __init__(self):
        super().__init__("Webhook URL is not configured")
