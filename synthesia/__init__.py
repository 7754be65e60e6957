"""Synthesia Python SDK
=====================

A thin, typed client for the Synthesia video-generation API.  Every method
maps onto one endpoint and returns a :class:`Result`: either :class:`Ok`
with the parsed response, or :class:`Err` with an :class:`ErrorInfo`.
HTTP and network failures are returned, not raised, so every call site
reads the same way.

Quick start::

    from synthesia import CreateVideoRequest, Synthesia, VideoInput

    with Synthesia(api_key="...") as client:

        # 1. Create a video
        result = client.videos.create(
            CreateVideoRequest(
                title="Welcome",
                input=[
                    VideoInput(
                        script_text="Hello and welcome!",
                        avatar="anna_costume1_cameraA",
                        background="green_screen",
                    )
                ],
            )
        )
        if result.error:
            raise SystemExit(result.error.message)
        video = result.data

        # 2. Wait for rendering to finish
        status = client.videos.wait_for_completion(video["id"])

        # 3. Fetch the download link
        if status == "complete":
            print(client.videos.get(video["id"]).unwrap()["download"])

Main classes
------------

:class:`Synthesia`
    The top-level client.  Exposes :attr:`~Synthesia.videos`,
    :attr:`~Synthesia.templates`, :attr:`~Synthesia.webhooks` and
    :attr:`~Synthesia.uploads`, and :meth:`~Synthesia.get_rate_limit_info`.

:class:`Ok`, :class:`Err`
    The two variants of :data:`Result`.  Both expose ``data`` and
    ``error``; ``unwrap()`` returns the data or raises.

Helpers in :mod:`synthesia.utils`
    Webhook signature verification, status polling, retry delays and
    status/error predicates.

Exceptions
----------

Only raised on request: by ``Err.unwrap()``, by polling, and by webhook
parsing.  All inherit from :class:`SynthesiaError`.

:class:`ValidationError` (400), :class:`AuthenticationError` (401, 403),
:class:`NotFoundError` (404), :class:`RateLimitError` (429),
:class:`ServerError` (5xx and network failures)
    Built from an :class:`ErrorInfo` by :meth:`SynthesiaError.from_error_info`.

:class:`VideoStatusError`, :class:`PollTimeout`
    Raised by :func:`~synthesia.utils.poll_video_status`.

:class:`WebhookVerificationError`
    Raised by :func:`~synthesia.utils.parse_webhook_payload`.
"""

from .client import Synthesia
from .exceptions import (
    AuthenticationError,
    NotFoundError,
    PollTimeout,
    RateLimitError,
    ServerError,
    SynthesiaError,
    ValidationError,
    VideoStatusError,
    WebhookVerificationError,
)
from .resources import Templates, Uploads, Videos, Webhooks
from .result import Err, ErrorInfo, Ok, RateLimitInfo, Result
from .types import (
    CreateVideoFromTemplateRequest,
    CreateVideoRequest,
    CreateWebhookRequest,
    CTASettings,
    ListTemplatesRequest,
    ListVideosRequest,
    ListWebhooksRequest,
    UpdateVideoRequest,
    UpdateWebhookRequest,
    UploadAssetRequest,
    VideoInput,
    VideoXliffRequest,
    XliffTranslationRequest,
)
from .utils import (
    calculate_retry_delay,
    compute_webhook_signature,
    parse_webhook_payload,
    poll_video_status,
    verify_webhook_signature,
)

__version__ = "0.1.0"
__all__ = [
    "Synthesia",
    "Videos",
    "Templates",
    "Webhooks",
    "Uploads",
    "Ok",
    "Err",
    "Result",
    "ErrorInfo",
    "RateLimitInfo",
    "CreateVideoRequest",
    "CreateVideoFromTemplateRequest",
    "VideoInput",
    "CTASettings",
    "UpdateVideoRequest",
    "ListVideosRequest",
    "VideoXliffRequest",
    "XliffTranslationRequest",
    "ListTemplatesRequest",
    "CreateWebhookRequest",
    "UpdateWebhookRequest",
    "ListWebhooksRequest",
    "UploadAssetRequest",
    "calculate_retry_delay",
    "compute_webhook_signature",
    "verify_webhook_signature",
    "parse_webhook_payload",
    "poll_video_status",
    "SynthesiaError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "VideoStatusError",
    "PollTimeout",
    "WebhookVerificationError",
]
