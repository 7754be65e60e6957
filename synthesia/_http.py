"""Internal HTTP client, not part of the public API."""
from __future__ import annotations

import logging
import threading
from typing import Any

import httpx

from .result import Err, ErrorInfo, Ok, RateLimitInfo, Result

logger = logging.getLogger("synthesia")

_RATE_LIMIT_LIMIT = "x-ratelimit-limit"
_RATE_LIMIT_REMAINING = "x-ratelimit-remaining"
_RATE_LIMIT_RESET = "x-ratelimit-reset"

# Sentinel so callers can pass timeout=None to disable the timeout.
_DEFAULT = object()


class HttpClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        upload_base_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        headers = {"Authorization": api_key, "Accept": "application/json"}
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self._upload_client = httpx.Client(
            base_url=upload_base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self._rate_limit: RateLimitInfo | None = None
        self._rate_limit_lock = threading.Lock()

    @property
    def rate_limit(self) -> RateLimitInfo | None:
        with self._rate_limit_lock:
            return self._rate_limit

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Result[Any]:
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs: Any) -> Result[Any]:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs: Any) -> Result[Any]:
        return self.request("PUT", path, json=json, **kwargs)

    def patch(self, path: str, json: Any = None, **kwargs: Any) -> Result[Any]:
        return self.request("PATCH", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> Result[Any]:
        return self.request("DELETE", path, **kwargs)

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        content: bytes | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        upload: bool = False,
        timeout: Any = _DEFAULT,
    ) -> Result[Any]:
        """Send a request and wrap the outcome in :class:`Ok` or :class:`Err`.

        Transport and HTTP failures are returned, never raised.  ``upload``
        selects the upload host instead of the primary API host.
        """
        client = self._upload_client if upload else self._client
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        extra: dict[str, Any] = {}
        if timeout is not _DEFAULT:
            extra["timeout"] = timeout

        logger.debug("%s %s  body=%s", method, path, json)
        try:
            response = client.request(
                method,
                path,
                json=json,
                content=content,
                params=params or None,
                headers=headers,
                **extra,
            )
        except httpx.RequestError as exc:
            logger.debug("%s %s failed: %s", method, path, exc)
            return Err(ErrorInfo(message=str(exc) or type(exc).__name__, status_code=500))

        logger.debug("← %s %s", response.status_code, response.url)
        self._update_rate_limit(response)

        if response.is_success:
            return Ok(self._parse_body(response))
        return Err(self._error_from_response(response))

    def _update_rate_limit(self, response: httpx.Response) -> None:
        limit = response.headers.get(_RATE_LIMIT_LIMIT)
        remaining = response.headers.get(_RATE_LIMIT_REMAINING)
        reset_at = response.headers.get(_RATE_LIMIT_RESET)
        if not (limit and remaining and reset_at):
            return
        try:
            info = RateLimitInfo(limit=int(limit), remaining=int(remaining), reset_at=reset_at)
        except ValueError:
            logger.debug("ignoring malformed rate-limit headers: %s/%s", limit, remaining)
            return
        with self._rate_limit_lock:
            self._rate_limit = info

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ErrorInfo:
        status = response.status_code
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = body.get("message") or body.get("error") or f"HTTP {status}"
            return ErrorInfo(
                message=str(message),
                status_code=status,
                code=body.get("code"),
                details=body.get("details"),
            )
        return ErrorInfo(message=f"HTTP {status}", status_code=status)

    def close(self) -> None:
        self._client.close()
        self._upload_client.close()
