"""Helpers for working with API results and webhooks.

None of these touch the network on their own.  :func:`poll_video_status`
drives a caller-supplied fetch function; everything else is pure.
"""
from __future__ import annotations

import hashlib
import hmac
import json
import logging
import string
import time
from typing import Any, Callable, Optional, Union

from .exceptions import PollTimeout, VideoStatusError, WebhookVerificationError
from .result import ErrorInfo, Result
from .types import WEBHOOK_EVENTS, WebhookPayload

logger = logging.getLogger("synthesia")

_SIGNATURE_PREFIX = "sha256="
_SIGNATURE_HEX_LENGTH = 64
_HEX_DIGITS = frozenset(string.hexdigits)

_TERMINAL_STATUSES = frozenset({"complete", "failed"})


# ------------------------------------------------------------------
# Webhooks
# ------------------------------------------------------------------


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def compute_webhook_signature(payload: Union[str, bytes], secret: Union[str, bytes]) -> str:
    """Return the ``sha256=<hex>`` signature Synthesia sends for *payload*."""
    digest = hmac.new(_to_bytes(secret), _to_bytes(payload), hashlib.sha256).hexdigest()
    return f"{_SIGNATURE_PREFIX}{digest}"


def verify_webhook_signature(
    payload: Union[str, bytes],
    signature: Any,
    secret: Union[str, bytes],
) -> bool:
    """Check that *payload* was signed with *secret*.

    Args:
        payload: The raw request body, exactly as received.
        signature: Value of the signature header, e.g. ``"sha256=ab12…"``.
        secret: The shared secret configured on the webhook.

    Returns:
        ``True`` when the signature matches.  Malformed signatures (wrong
        prefix, wrong length, non-hex characters, not a string) return
        ``False`` rather than raising.
    """
    if not isinstance(signature, str) or not signature.startswith(_SIGNATURE_PREFIX):
        return False
    received = signature[len(_SIGNATURE_PREFIX):]
    if len(received) != _SIGNATURE_HEX_LENGTH or not set(received) <= _HEX_DIGITS:
        return False
    expected = compute_webhook_signature(payload, secret)[len(_SIGNATURE_PREFIX):]
    return hmac.compare_digest(expected.encode("ascii"), received.lower().encode("ascii"))


def is_valid_webhook_event(event: Any) -> bool:
    return event in WEBHOOK_EVENTS


def parse_webhook_payload(
    payload: Union[str, bytes],
    signature: Any,
    secret: Union[str, bytes],
) -> WebhookPayload:
    """Verify and decode an inbound webhook body.

    Raises:
        WebhookVerificationError: if the signature does not match, the body
            is not a JSON object, or the event type is unknown.
    """
    if not verify_webhook_signature(payload, signature, secret):
        raise WebhookVerificationError("Invalid webhook signature")
    try:
        body = json.loads(payload)
    except ValueError as exc:
        raise WebhookVerificationError(f"Webhook body is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise WebhookVerificationError("Webhook body must be a JSON object")
    if not is_valid_webhook_event(body.get("event")):
        raise WebhookVerificationError(f"Unknown webhook event: {body.get('event')!r}")
    return body  # type: ignore[return-value]


# ------------------------------------------------------------------
# Status predicates
# ------------------------------------------------------------------


def is_video_processing(status: str) -> bool:
    return status == "in_progress"


def is_video_complete(status: str) -> bool:
    return status == "complete"


def is_video_failed(status: str) -> bool:
    return status == "failed"


def is_rate_limited(error: ErrorInfo) -> bool:
    return error.status_code == 429


def is_authentication_error(error: ErrorInfo) -> bool:
    return error.status_code in (401, 403)


def is_validation_error(error: ErrorInfo) -> bool:
    return error.status_code == 400


def is_not_found(error: ErrorInfo) -> bool:
    return error.status_code == 404


def is_server_error(error: ErrorInfo) -> bool:
    return error.status_code >= 500


def format_error_message(error: ErrorInfo) -> str:
    """Render *error* as ``"CODE: message"``, or just the message without a code."""
    if error.code:
        return f"{error.code}: {error.message}"
    return error.message


# ------------------------------------------------------------------
# Retry / polling
# ------------------------------------------------------------------


def calculate_retry_delay(attempt: int, base_delay: float = 1000) -> float:
    """Exponential backoff: ``base_delay * 2 ** attempt`` (no jitter, no cap).

    Units follow *base_delay*; the default is milliseconds.
    """
    return base_delay * 2 ** attempt


def poll_video_status(
    get_video: Callable[[str], Result[Any]],
    video_id: str,
    max_attempts: int = 60,
    interval_ms: int = 10_000,
    on_status_update: Optional[Callable[[str], None]] = None,
) -> str:
    """Block until the video reaches ``complete`` or ``failed``.

    Args:
        get_video: Fetch function, typically ``client.videos.get``.
        video_id: The video to watch.
        max_attempts: Number of fetches before giving up. Defaults to 60.
        interval_ms: Milliseconds to sleep between fetches. Defaults to
            10 000.
        on_status_update: Called with each status observed.

    Returns:
        The terminal status, ``"complete"`` or ``"failed"``.

    Raises:
        VideoStatusError: if a fetch returns no video data, or data
            without a ``status``.
        PollTimeout: if *max_attempts* fetches pass without a terminal
            status.
    """
    status: str | None = None
    for attempt in range(max_attempts):
        result = get_video(video_id)
        data = result.data
        if not isinstance(data, dict) or "status" not in data:
            raise VideoStatusError(video_id, result.error)

        status = data["status"]
        logger.debug("video=%s status=%s (attempt %d/%d)", video_id, status, attempt + 1, max_attempts)
        if on_status_update:
            on_status_update(status)

        if status in _TERMINAL_STATUSES:
            return status

        if attempt < max_attempts - 1:
            time.sleep(interval_ms / 1000)

    raise PollTimeout(video_id, max_attempts, last_status=status)
