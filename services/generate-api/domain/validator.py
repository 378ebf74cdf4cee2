"""Validation and normalization of submitted video requests."""

import math
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from domain.models import ValidationResult, VideoRequest
from exceptions import InvalidVideoRequestError

DEFAULT_MIN_TOPIC_LENGTH = 2

STYLE_REQUIRED = "Please select a video style"
DURATION_REQUIRED = "Please select video duration"
DURATION_NOT_POSITIVE = "Video duration must be a positive number"

# Leading number of a duration label such as "30", "30秒" or "1.5 min".
_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def topic_too_short_message(min_length: int) -> str:
    return f"Video topic must be at least {min_length} characters"


def validate(
    raw: Mapping[str, Any], min_topic_length: int = DEFAULT_MIN_TOPIC_LENGTH
) -> ValidationResult:
    """
    Checks the raw ``topic``, ``style`` and ``duration`` fields.

    Errors are collected rather than raised, in field order. The input
    mapping is never modified.

    Args:
        raw: User-supplied fields, typically a decoded JSON body.
        min_topic_length: Minimum length of the trimmed topic.

    Returns:
        ValidationResult listing every failed constraint.
    """
    errors: list[str] = []

    topic = raw.get("topic")
    if not isinstance(topic, str) or len(topic.strip()) < min_topic_length:
        errors.append(topic_too_short_message(min_topic_length))

    style = raw.get("style")
    if not isinstance(style, str) or not style.strip():
        errors.append(STYLE_REQUIRED)

    duration_error = _check_duration(raw.get("duration"))
    if duration_error:
        errors.append(duration_error)

    return ValidationResult(valid=not errors, errors=errors)


def _check_duration(duration: Any) -> str | None:
    if duration is None or (isinstance(duration, str) and not duration.strip()):
        return DURATION_REQUIRED

    if isinstance(duration, bool):
        return DURATION_NOT_POSITIVE

    if isinstance(duration, int):
        return None if duration > 0 else DURATION_NOT_POSITIVE

    if isinstance(duration, float):
        # inf survives json.loads but cannot be re-encoded for the webhook
        if math.isfinite(duration) and duration > 0:
            return None
        return DURATION_NOT_POSITIVE

    if isinstance(duration, str):
        match = _LEADING_NUMBER.match(duration)
        if match and 0 < float(match.group(1)) < math.inf:
            return None

    return DURATION_NOT_POSITIVE


def build_video_request(
    raw: Mapping[str, Any],
    min_topic_length: int = DEFAULT_MIN_TOPIC_LENGTH,
    now: datetime | None = None,
) -> VideoRequest:
    """
    Validates raw fields and returns the normalized request.

    The submission timestamp is kept when it is valid ISO-8601, otherwise the
    current UTC time is used.

    Raises:
        InvalidVideoRequestError: If any field fails validation.
    """
    result = validate(raw, min_topic_length)
    if not result.valid:
        raise InvalidVideoRequestError(result.errors)

    duration = raw["duration"]
    if isinstance(duration, str):
        duration = duration.strip()

    return VideoRequest(
        topic=raw["topic"].strip(),
        style=raw["style"].strip(),
        duration=duration,
        timestamp=_submission_timestamp(raw.get("timestamp"), now),
    )


def _submission_timestamp(value: Any, now: datetime | None) -> str:
    if isinstance(value, str) and value.strip():
        try:
            # fromisoformat rejects the "Z" suffix browsers emit before 3.11
            datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            return value.strip()
        except ValueError:
            pass
    current = now or datetime.now(timezone.utc)
    return current.isoformat().replace("+00:00", "Z")
