"""Domain models for video generation requests."""

from typing import Any

from pydantic import BaseModel, model_validator

Duration = int | float | str


class VideoRequest(BaseModel, frozen=True):
    """A validated, normalized video generation request."""

    topic: str
    style: str
    duration: Duration
    timestamp: str


class ValidationResult(BaseModel, frozen=True):
    """Outcome of validating raw request fields."""

    valid: bool
    errors: list[str] = []

    @model_validator(mode="after")
    def _errors_match_validity(self) -> "ValidationResult":
        if self.valid == bool(self.errors):
            raise ValueError("errors must be empty exactly when valid is true")
        return self


class ForwardResult(BaseModel, frozen=True):
    """
    Uniform result of a single webhook call.

    On success ``payload`` holds the parsed response body (JSON, or the raw
    text when the body is not JSON). On failure ``error`` holds a message and
    ``rate_limited`` tells an upstream 429 apart from other failures.
    """

    success: bool
    payload: Any = None
    error: str | None = None
    status_code: int | None = None
    rate_limited: bool = False

    @model_validator(mode="after")
    def _error_matches_success(self) -> "ForwardResult":
        if self.success and self.error is not None:
            raise ValueError("a successful result carries no error")
        if not self.success and not self.error:
            raise ValueError("a failed result must carry an error message")
        return self

    @classmethod
    def ok(cls, payload: Any, status_code: int) -> "ForwardResult":
        return cls(success=True, payload=payload, status_code=status_code)

    @classmethod
    def failed(
        cls,
        error: str,
        status_code: int | None = None,
        rate_limited: bool = False,
    ) -> "ForwardResult":
        return cls(
            success=False,
            error=error,
            status_code=status_code,
            rate_limited=rate_limited,
        )
