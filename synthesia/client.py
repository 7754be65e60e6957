from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ._http import HttpClient
from .resources import Templates, Uploads, Videos, Webhooks
from .result import RateLimitInfo

logger = logging.getLogger("synthesia")

_DEFAULT_BASE_URL = "https://api.synthesia.io/v2"
_DEFAULT_UPLOAD_BASE_URL = "https://upload.api.synthesia.io/v2"
_DEFAULT_TIMEOUT = 30.0


class Synthesia:
    """Top-level Synthesia API client.

    Create a single instance and reuse it across your application.  The
    client manages two HTTP connection pools (the API host and the upload
    host); close them when you are done, either by calling :meth:`close`
    or by using the client as a context manager::

        with Synthesia(api_key="...") as client:
            result = client.videos.get("video-123")
            if result.error:
                print(result.error.message)

    Every resource method returns a :class:`~synthesia.Result` rather than
    raising on HTTP or network failures.
    """

    videos: Videos
    """Create, list, update, delete and poll videos.  See :class:`Videos`."""

    templates: Templates
    """Browse templates.  See :class:`Templates`."""

    webhooks: Webhooks
    """Manage webhook subscriptions.  See :class:`Webhooks`."""

    uploads: Uploads
    """Upload images, videos and script audio.  See :class:`Uploads`."""

    def __init__(
        self,
        api_key: str,
        base_url: str = _DEFAULT_BASE_URL,
        upload_base_url: str = _DEFAULT_UPLOAD_BASE_URL,
        timeout: float = _DEFAULT_TIMEOUT,
        debug: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            api_key: Your Synthesia API key.  Sent verbatim in the
                ``Authorization`` header.
            base_url: Override the API base URL.
                Defaults to ``https://api.synthesia.io/v2``.
            upload_base_url: Override the upload host used by
                :attr:`uploads`.
                Defaults to ``https://upload.api.synthesia.io/v2``.
            timeout: HTTP request timeout in seconds. Defaults to 30.
            debug: Set to ``True`` to enable verbose request/response
                logging via the ``synthesia`` logger.
            transport: Custom ``httpx`` transport, e.g.
                ``httpx.MockTransport`` in tests.
        """
        if not api_key:
            raise ValueError("api_key is required")

        if debug:
            logger.setLevel(logging.DEBUG)
            if not logger.handlers:
                logger.addHandler(logging.StreamHandler())

        self._http = HttpClient(
            api_key=api_key,
            base_url=base_url,
            upload_base_url=upload_base_url,
            timeout=timeout,
            transport=transport,
        )
        self.videos = Videos(self._http)
        self.templates = Templates(self._http)
        self.webhooks = Webhooks(self._http)
        self.uploads = Uploads(self._http)

    def get_rate_limit_info(self) -> Optional[RateLimitInfo]:
        """Return the rate-limit headers from the most recent response.

        ``None`` until a response has carried the ``x-ratelimit-*``
        headers.  Responses without them leave the last snapshot in place.
        """
        return self._http.rate_limit

    def close(self) -> None:
        """Close the underlying HTTP connection pools."""
        self._http.close()

    def __enter__(self) -> "Synthesia":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
