"""Request builders and response shapes for the Synthesia v2 API.

Requests are dataclasses with explicit defaults.  ``to_payload()`` produces
the camelCase JSON body (or query parameters) sent on the wire; fields left
as ``None`` are omitted.

Responses are returned as plain dicts; the ``TypedDict`` classes below
describe their shape for type checkers and carry no behaviour.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, TypedDict

VideoStatus = Literal["in_progress", "complete", "failed"]
Visibility = Literal["public", "private"]
AspectRatio = Literal["16:9", "9:16", "1:1", "4:5", "5:4"]
VideoSource = Literal["workspace", "personal", "shared"]
TemplateSource = Literal["synthesia", "workspace"]
WebhookEvent = Literal["video.completed", "video.failed"]

WEBHOOK_EVENTS: tuple[str, ...] = ("video.completed", "video.failed")


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in payload.items() if v is not None}


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass
class CTASettings:
    label: str
    url: str

    def to_payload(self) -> dict[str, Any]:
        return {"label": self.label, "url": self.url}


@dataclass
class VideoInput:
    """One scene of a video: what the avatar says, and in front of what."""

    script_text: str
    avatar: str
    background: str
    script_language: Optional[str] = None
    avatar_settings: Optional[dict[str, Any]] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "scriptText": self.script_text,
                "avatar": self.avatar,
                "background": self.background,
                "scriptLanguage": self.script_language,
                "avatarSettings": self.avatar_settings,
            }
        )


@dataclass
class CreateVideoRequest:
    title: str
    input: list[VideoInput]
    visibility: Visibility = "private"
    aspect_ratio: AspectRatio = "16:9"
    test: Optional[bool] = None
    description: Optional[str] = None
    callback_id: Optional[str] = None
    cta_settings: Optional[CTASettings] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "test": self.test,
                "title": self.title,
                "description": self.description,
                "visibility": self.visibility,
                "aspectRatio": self.aspect_ratio,
                "input": [scene.to_payload() for scene in self.input],
                "callbackId": self.callback_id,
                "ctaSettings": self.cta_settings.to_payload() if self.cta_settings else None,
            }
        )


@dataclass
class CreateVideoFromTemplateRequest:
    template_id: str
    template_data: dict[str, Any] = field(default_factory=dict)
    title: str = "Video from Template"
    visibility: Visibility = "private"
    test: Optional[bool] = None
    description: Optional[str] = None
    callback_id: Optional[str] = None
    cta_settings: Optional[CTASettings] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "test": self.test,
                "templateId": self.template_id,
                "templateData": self.template_data,
                "title": self.title,
                "description": self.description,
                "visibility": self.visibility,
                "callbackId": self.callback_id,
                "ctaSettings": self.cta_settings.to_payload() if self.cta_settings else None,
            }
        )


@dataclass
class UpdateVideoRequest:
    title: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[Visibility] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {"title": self.title, "description": self.description, "visibility": self.visibility}
        )


@dataclass
class ListVideosRequest:
    source: Optional[VideoSource] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"source": self.source, "offset": self.offset, "limit": self.limit})


@dataclass
class VideoXliffRequest:
    video_version: Optional[int] = None
    xliff_version: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"videoVersion": self.video_version, "xliffVersion": self.xliff_version})


@dataclass
class XliffTranslationRequest:
    video_id: str
    xliff_content: str
    callback_id: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "videoId": self.video_id,
                "xliffContent": self.xliff_content,
                "callbackId": self.callback_id,
            }
        )


@dataclass
class ListTemplatesRequest:
    source: Optional[TemplateSource] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"source": self.source, "offset": self.offset, "limit": self.limit})


@dataclass
class CreateWebhookRequest:
    url: str
    events: list[WebhookEvent]
    secret: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"url": self.url, "events": list(self.events), "secret": self.secret})


@dataclass
class UpdateWebhookRequest:
    url: Optional[str] = None
    events: Optional[list[WebhookEvent]] = None
    secret: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact(
            {
                "url": self.url,
                "events": list(self.events) if self.events is not None else None,
                "secret": self.secret,
            }
        )


@dataclass
class ListWebhooksRequest:
    limit: Optional[int] = None
    offset: Optional[int] = None
    deleted: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        return _compact({"limit": self.limit, "offset": self.offset, "deleted": self.deleted})


@dataclass
class UploadAssetRequest:
    file: bytes
    content_type: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class Video(TypedDict, total=False):
    id: str
    title: str
    description: str
    status: VideoStatus
    visibility: Visibility
    createdAt: int
    lastUpdatedAt: int
    download: str
    duration: str
    thumbnail: dict[str, str]
    callbackId: str
    ctaSettings: dict[str, str]


class ListVideosResponse(TypedDict, total=False):
    videos: list[Video]
    nextOffset: int


class TemplateVariable(TypedDict, total=False):
    name: str
    type: str
    required: bool
    description: str


class Template(TypedDict, total=False):
    id: str
    title: str
    description: str
    variables: list[TemplateVariable]
    createdAt: int
    lastUpdatedAt: int


class ListTemplatesResponse(TypedDict, total=False):
    templates: list[Template]
    nextOffset: int


class Webhook(TypedDict, total=False):
    id: str
    url: str
    status: str
    events: list[WebhookEvent]
    secret: str
    createdAt: int
    lastUpdatedAt: int


class ListWebhooksResponse(TypedDict, total=False):
    webhooks: list[Webhook]
    nextOffset: int


class Asset(TypedDict, total=False):
    id: str
    title: str


class ScriptAudioAsset(TypedDict):
    id: str


class XliffTranslationResponse(TypedDict, total=False):
    translatedVideoId: str
    message: str


class WebhookPayload(TypedDict):
    event: WebhookEvent
    data: dict[str, Any]
    timestamp: str
    webhook_id: str
