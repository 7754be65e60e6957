from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..result import Result
from ..types import Asset, ScriptAudioAsset, UploadAssetRequest

if TYPE_CHECKING:
    from .._http import HttpClient

logger = logging.getLogger("synthesia")

_SCRIPT_AUDIO_CONTENT_TYPE = "audio/mpeg"


class Uploads:
    """Accessed via client.uploads: push binary assets to the upload host.

    Bodies are sent raw with an explicit ``Content-Type``; the API accepts
    ``image/jpeg``, ``image/png``, ``image/svg+xml``, ``video/mp4`` and
    ``video/webm`` for assets, and MP3 for script audio.
    """

    def __init__(self, http: "HttpClient"):
        self._http = http

    def upload_asset(self, request: UploadAssetRequest) -> Result[Asset]:
        """Upload an image or video asset.

        Returns:
            ``Ok`` with the new :class:`~synthesia.types.Asset`, or ``Err``
            with the server's error, e.g. 415 when it rejects the content
            type.
        """
        logger.debug("uploading asset bytes=%d content_type=%s", len(request.file), request.content_type)
        return self._http.post(
            "/assets",
            content=request.file,
            headers={"Content-Type": request.content_type},
            upload=True,
        )

    def upload_image(self, data: bytes, content_type: str = "image/png") -> Result[Asset]:
        return self.upload_asset(UploadAssetRequest(file=data, content_type=content_type))

    def upload_video(self, data: bytes, content_type: str = "video/mp4") -> Result[Asset]:
        return self.upload_asset(UploadAssetRequest(file=data, content_type=content_type))

    def upload_file(self, path: str | Path, content_type: Optional[str] = None) -> Result[Asset]:
        """Upload an asset from disk.

        Args:
            path: Local path to the image or video.
            content_type: MIME type of the file.  Inferred from the file
                extension when omitted.

        Raises:
            FileNotFoundError: if *path* does not exist on disk.
            ValueError: if no content type is given and none can be
                inferred from the extension.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Asset file not found: {path}")

        if content_type is None:
            content_type, _ = mimetypes.guess_type(str(path))
            if content_type is None:
                raise ValueError(f"Cannot infer content type for {path.name!r}; pass content_type")

        return self.upload_asset(UploadAssetRequest(file=path.read_bytes(), content_type=content_type))

    def upload_script_audio(self, data: bytes) -> Result[ScriptAudioAsset]:
        """Upload an MP3 voice-over to use as a scene's script audio."""
        return self._http.post(
            "/scriptAudio",
            content=data,
            headers={"Content-Type": _SCRIPT_AUDIO_CONTENT_TYPE},
            upload=True,
        )
