"""Domain layer exports."""

from domain.models import ForwardResult, ValidationResult, VideoRequest
from domain.validator import build_video_request, validate

__all__ = [
    "ForwardResult",
    "ValidationResult",
    "VideoRequest",
    "build_video_request",
    "validate",
]
