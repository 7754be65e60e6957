"""Result envelope returned by every API call.

A call never raises for HTTP or network failures.  It returns either
:class:`Ok` holding the parsed response body or :class:`Err` holding an
:class:`ErrorInfo`.  Both variants expose ``data`` and ``error`` so the usual
pattern reads::

    result = client.videos.get("video-123")
    if result.error:
        print(result.error.status_code, result.error.message)
    else:
        print(result.data["status"])

or, with pattern matching::

    match client.videos.get("video-123"):
        case Ok(data=video):
            ...
        case Err(error=error):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from .exceptions import SynthesiaError

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorInfo:
    """A failed call, normalized from the HTTP response or network error."""

    message: str
    status_code: int
    code: str | None = None
    details: Any = None


@dataclass(frozen=True)
class RateLimitInfo:
    """Most recent rate-limit headers observed by a client."""

    limit: int
    remaining: int
    reset_at: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T

    @property
    def error(self) -> None:
        return None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Err:
    error: ErrorInfo

    @property
    def data(self) -> None:
        return None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the typed exception matching this error's status code."""
        raise SynthesiaError.from_error_info(self.error)


Result = Union[Ok[T], Err]
