from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import ErrorInfo


class SynthesiaError(Exception):
    """Base exception for all Synthesia SDK errors.

    API methods never raise these for HTTP failures; they return an
    :class:`~synthesia.Err` instead.  Call ``result.unwrap()`` or
    :meth:`from_error_info` to opt into exceptions.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details

    @classmethod
    def from_error_info(cls, error: "ErrorInfo") -> "SynthesiaError":
        """Build the most specific exception for *error*'s status code."""
        status = error.status_code
        kwargs = {"status_code": status, "code": error.code, "details": error.details}
        if status == 400:
            return ValidationError(error.message, **kwargs)
        if status in (401, 403):
            return AuthenticationError(error.message, **kwargs)
        if status == 404:
            return NotFoundError(error.message, **kwargs)
        if status == 429:
            return RateLimitError(
                error.message, retry_after=_retry_after(error.details), **kwargs
            )
        if status >= 500:
            return ServerError(error.message, **kwargs)
        return SynthesiaError(error.message, **kwargs)

    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    def is_authentication_error(self) -> bool:
        return self.status_code in (401, 403)

    def is_validation_error(self) -> bool:
        return self.status_code == 400

    def is_not_found(self) -> bool:
        return self.status_code == 404

    def is_server_error(self) -> bool:
        return self.status_code is not None and self.status_code >= 500


class ValidationError(SynthesiaError):
    """Raised when the request was rejected as malformed (400)."""


class AuthenticationError(SynthesiaError):
    """Raised when the API key is missing, invalid or lacks access (401, 403)."""


class NotFoundError(SynthesiaError):
    """Raised when the requested resource does not exist (404)."""


class RateLimitError(SynthesiaError):
    """Raised when the rate limit is exceeded (429).

    ``retry_after`` holds the server-suggested delay in seconds, if any.
    """

    def __init__(self, message: str, retry_after: float | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(SynthesiaError):
    """Raised on 5xx responses and network failures."""


class VideoStatusError(SynthesiaError):
    """Raised when polling receives a response without video data."""

    def __init__(self, video_id: str, error: "ErrorInfo | None" = None):
        message = f"Failed to get status for video {video_id!r}"
        if error is not None:
            message = f"{message}: {error.message}"
        super().__init__(
            message,
            status_code=error.status_code if error else None,
            code=error.code if error else None,
            details=error.details if error else None,
        )
        self.video_id = video_id
        self.error = error


class PollTimeout(SynthesiaError):
    """Raised when polling exhausts its attempts without a terminal status."""

    def __init__(self, video_id: str, max_attempts: int, last_status: str | None = None):
        super().__init__(
            f"Video {video_id!r} did not finish processing within {max_attempts} attempts"
        )
        self.video_id = video_id
        self.max_attempts = max_attempts
        self.last_status = last_status


class WebhookVerificationError(SynthesiaError):
    """Raised when a webhook payload fails signature or event validation."""


def _retry_after(details: Any) -> float | None:
    if not isinstance(details, dict):
        return None
    for key in ("retryAfter", "retry_after"):
        value = details.get(key)
        if value is None:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            return None
    return None
