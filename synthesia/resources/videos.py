from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from ..result import Result
from ..types import (
    CreateVideoFromTemplateRequest,
    CreateVideoRequest,
    CTASettings,
    ListVideosRequest,
    ListVideosResponse,
    UpdateVideoRequest,
    Video,
    VideoXliffRequest,
    Visibility,
    XliffTranslationRequest,
    XliffTranslationResponse,
)
from ..utils import poll_video_status

if TYPE_CHECKING:
    from .._http import HttpClient

logger = logging.getLogger("synthesia")


class Videos:
    """Accessed via client.videos: create, inspect and manage videos."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    def create(self, request: CreateVideoRequest) -> Result[Video]:
        """Create a video from one or more scenes.

        Args:
            request: The video definition.  ``visibility`` defaults to
                ``"private"`` and ``aspect_ratio`` to ``"16:9"``.

        Returns:
            ``Ok`` with the new :class:`~synthesia.types.Video` (status
            ``"in_progress"``), or ``Err``, a 400 when the request is
            malformed.

        Example::

            result = client.videos.create(
                CreateVideoRequest(
                    title="Welcome",
                    input=[VideoInput(script_text="Hello!", avatar="anna_costume1_cameraA",
                                      background="green_screen")],
                )
            )
        """
        logger.debug("creating video title=%r scenes=%d", request.title, len(request.input))
        return self._http.post("/videos", json=request.to_payload())

    def create_from_template(
        self,
        template_id: str,
        template_data: dict[str, Any],
        *,
        title: str = "Video from Template",
        visibility: Visibility = "private",
        test: Optional[bool] = None,
        description: Optional[str] = None,
        callback_id: Optional[str] = None,
        cta_settings: Optional[CTASettings] = None,
    ) -> Result[Video]:
        """Create a video by filling in a template's variables.

        Args:
            template_id: The template to render.
            template_data: Values for the template's variables, keyed by
                variable name.
            title: Video title. Defaults to ``"Video from Template"``.
            visibility: Defaults to ``"private"``.
        """
        request = CreateVideoFromTemplateRequest(
            template_id=template_id,
            template_data=template_data,
            title=title,
            visibility=visibility,
            test=test,
            description=description,
            callback_id=callback_id,
            cta_settings=cta_settings,
        )
        return self._http.post("/videos/fromTemplate", json=request.to_payload())

    def list(self, request: Optional[ListVideosRequest] = None) -> Result[ListVideosResponse]:
        """List videos, optionally filtered by source and paginated."""
        params = request.to_payload() if request else {}
        return self._http.get("/videos", params=params)

    def get(self, video_id: str) -> Result[Video]:
        """Fetch a single video.

        ``download`` is only present once ``status == "complete"``.
        """
        return self._http.get(f"/videos/{video_id}")

    def update(self, video_id: str, request: UpdateVideoRequest) -> Result[Video]:
        return self._http.patch(f"/videos/{video_id}", json=request.to_payload())

    def delete(self, video_id: str) -> Result[None]:
        return self._http.delete(f"/videos/{video_id}")

    def get_xliff(self, video_id: str, request: Optional[VideoXliffRequest] = None) -> Result[str]:
        """Export the video's script as an XLIFF document for translation.

        Returns:
            ``Ok`` with the XLIFF document as a string.
        """
        params = request.to_payload() if request else None
        return self._http.get(f"/videos/{video_id}/xliff", params=params)

    def upload_xliff_translation(
        self, request: XliffTranslationRequest
    ) -> Result[XliffTranslationResponse]:
        """Submit a translated XLIFF document, producing a translated video."""
        return self._http.post("/translate/manual", json=request.to_payload())

    def wait_for_completion(
        self,
        video_id: str,
        max_attempts: int = 60,
        interval_ms: int = 10_000,
        on_status_update: Optional[Callable[[str], None]] = None,
    ) -> str:
        """Block until the video is ``complete`` or ``failed``.

        See :func:`~synthesia.utils.poll_video_status` for the arguments and
        the exceptions raised.
        """
        return poll_video_status(
            self.get,
            video_id,
            max_attempts=max_attempts,
            interval_ms=interval_ms,
            on_status_update=on_status_update,
        )
