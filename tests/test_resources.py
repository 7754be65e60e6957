"""Tests for the resource façades: each method's HTTP verb, path, body,
query parameters and host."""

from __future__ import annotations

from pathlib import Path

import pytest

from synthesia import (
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
    VideoStatusError,
    VideoXliffRequest,
    XliffTranslationRequest,
)

VIDEO = {
    "id": "video-123",
    "title": "Test Video",
    "status": "in_progress",
    "visibility": "private",
    "createdAt": 1672531200,
    "lastUpdatedAt": 1672531200,
}


def _scene() -> VideoInput:
    return VideoInput(
        script_text="Hello world",
        avatar="anna_costume1_cameraA",
        background="green_screen",
    )


# ---------------------------------------------------------------------------
# Videos
# ---------------------------------------------------------------------------


class TestVideos:

    def test_create(self, client, fake_api):
        fake_api.respond(201, VIDEO)

        result = client.videos.create(CreateVideoRequest(title="Test Video", input=[_scene()]))

        assert result.data == VIDEO
        assert fake_api.last.method == "POST"
        assert fake_api.last.url.path == "/v2/videos"
        assert fake_api.last.headers["Content-Type"] == "application/json"
        assert fake_api.last_json() == {
            "title": "Test Video",
            "visibility": "private",
            "aspectRatio": "16:9",
            "input": [
                {
                    "scriptText": "Hello world",
                    "avatar": "anna_costume1_cameraA",
                    "background": "green_screen",
                }
            ],
        }

    def test_create_with_optional_fields(self, client, fake_api):
        fake_api.respond(201, VIDEO)

        client.videos.create(
            CreateVideoRequest(
                title="Launch",
                input=[_scene()],
                visibility="public",
                aspect_ratio="9:16",
                test=True,
                description="Product launch",
                callback_id="cb-1",
                cta_settings=CTASettings(label="Buy", url="https://example.com"),
            )
        )

        body = fake_api.last_json()
        assert body["test"] is True
        assert body["visibility"] == "public"
        assert body["aspectRatio"] == "9:16"
        assert body["description"] == "Product launch"
        assert body["callbackId"] == "cb-1"
        assert body["ctaSettings"] == {"label": "Buy", "url": "https://example.com"}

    def test_create_malformed_returns_400(self, client, fake_api):
        fake_api.respond(400, {"message": "input[0].avatar is required", "code": "BAD_REQUEST"})

        result = client.videos.create(
            CreateVideoRequest(
                title="Broken",
                input=[VideoInput(script_text="Hi", avatar="", background="green_screen")],
            )
        )

        assert result.data is None
        assert result.error.status_code == 400
        assert result.error.code == "BAD_REQUEST"

    def test_create_from_template_applies_defaults(self, client, fake_api):
        fake_api.respond(201, VIDEO)

        client.videos.create_from_template("template-123", {"name": "John"})

        assert fake_api.last.method == "POST"
        assert fake_api.last.url.path == "/v2/videos/fromTemplate"
        assert fake_api.last_json() == {
            "templateId": "template-123",
            "templateData": {"name": "John"},
            "title": "Video from Template",
            "visibility": "private",
        }

    def test_create_from_template_with_options(self, client, fake_api):
        fake_api.respond(201, VIDEO)

        client.videos.create_from_template(
            "template-123", {"name": "John"}, title="Custom Title", visibility="public", test=True
        )

        body = fake_api.last_json()
        assert body["title"] == "Custom Title"
        assert body["visibility"] == "public"
        assert body["test"] is True

    def test_list_without_filters(self, client, fake_api):
        fake_api.respond(200, {"videos": [VIDEO], "nextOffset": 1})

        result = client.videos.list()

        assert result.data["nextOffset"] == 1
        assert fake_api.last.method == "GET"
        assert fake_api.last.url.path == "/v2/videos"
        assert fake_api.last.url.query == b""

    def test_list_with_filters(self, client, fake_api):
        fake_api.respond(200, {"videos": []})

        client.videos.list(ListVideosRequest(source="workspace", offset=0, limit=10))

        params = fake_api.last.url.params
        assert params["source"] == "workspace"
        assert params["offset"] == "0"
        assert params["limit"] == "10"

    def test_get(self, client, fake_api):
        fake_api.respond(200, {**VIDEO, "status": "complete", "download": "https://example.com/v.mp4"})

        result = client.videos.get("video-123")

        assert result.data["download"] == "https://example.com/v.mp4"
        assert fake_api.last.method == "GET"
        assert fake_api.last.url.path == "/v2/videos/video-123"

    def test_get_nonexistent_returns_404(self, client, fake_api):
        fake_api.respond(404, {"message": "Video not found", "code": "NOT_FOUND"})

        result = client.videos.get("does-not-exist")

        assert result.data is None
        assert result.error.status_code == 404

    def test_update(self, client, fake_api):
        fake_api.respond(200, {**VIDEO, "title": "Renamed"})

        client.videos.update("video-123", UpdateVideoRequest(title="Renamed"))

        assert fake_api.last.method == "PATCH"
        assert fake_api.last.url.path == "/v2/videos/video-123"
        assert fake_api.last_json() == {"title": "Renamed"}

    def test_delete(self, client, fake_api):
        fake_api.respond(204)

        result = client.videos.delete("video-123")

        assert result.data is None
        assert result.error is None
        assert fake_api.last.method == "DELETE"
        assert fake_api.last.url.path == "/v2/videos/video-123"

    def test_get_xliff(self, client, fake_api):
        xliff = '<?xml version="1.0"?>\n<xliff version="1.2"></xliff>'
        fake_api.respond(200, text=xliff)

        result = client.videos.get_xliff(
            "video-123", VideoXliffRequest(video_version=1, xliff_version="1.2")
        )

        assert result.data == xliff
        assert fake_api.last.url.path == "/v2/videos/video-123/xliff"
        assert fake_api.last.url.params["videoVersion"] == "1"
        assert fake_api.last.url.params["xliffVersion"] == "1.2"

    def test_upload_xliff_translation(self, client, fake_api):
        fake_api.respond(200, {"translatedVideoId": "translated-123"})

        result = client.videos.upload_xliff_translation(
            XliffTranslationRequest(
                video_id="video-123",
                xliff_content='<?xml version="1.0"?>',
                callback_id="translation-123",
            )
        )

        assert result.data == {"translatedVideoId": "translated-123"}
        assert fake_api.last.method == "POST"
        assert fake_api.last.url.path == "/v2/translate/manual"
        assert fake_api.last_json() == {
            "videoId": "video-123",
            "xliffContent": '<?xml version="1.0"?>',
            "callbackId": "translation-123",
        }

    def test_wait_for_completion(self, client, fake_api, monkeypatch):
        sleeps = []
        monkeypatch.setattr("synthesia.utils.time.sleep", sleeps.append)
        fake_api.respond(200, {**VIDEO, "status": "in_progress"})
        fake_api.respond(200, {**VIDEO, "status": "complete"})

        status = client.videos.wait_for_completion("video-123", interval_ms=500)

        assert status == "complete"
        assert len(fake_api.requests) == 2
        assert sleeps == [0.5]

    def test_wait_for_completion_html_body(self, client, fake_api):
        fake_api.respond(200, text="<html>gateway</html>")

        with pytest.raises(VideoStatusError):
            client.videos.wait_for_completion("video-123")

        assert len(fake_api.requests) == 1


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplates:

    def test_list(self, client, fake_api):
        fake_api.respond(200, {"templates": [], "nextOffset": 1})

        client.templates.list()

        assert fake_api.last.url.path == "/v2/templates"
        assert fake_api.last.url.query == b""

    def test_list_with_source(self, client, fake_api):
        fake_api.respond(200, {"templates": []})

        client.templates.list(ListTemplatesRequest(source="workspace"))

        assert fake_api.last.url.params["source"] == "workspace"

    def test_get(self, client, fake_api):
        fake_api.respond(200, {"id": "template-123", "title": "Onboarding", "variables": []})

        result = client.templates.get("template-123")

        assert result.data["title"] == "Onboarding"
        assert fake_api.last.url.path == "/v2/templates/template-123"

    @pytest.mark.parametrize(
        "method, source",
        [("list_synthesia", "synthesia"), ("list_workspace", "workspace")],
    )
    def test_source_shortcuts(self, client, fake_api, method, source):
        fake_api.respond(200, {"templates": []})

        getattr(client.templates, method)()

        assert fake_api.last.url.params["source"] == source


# ---------------------------------------------------------------------------
# Webhooks
# ---------------------------------------------------------------------------


class TestWebhooks:

    def test_create(self, client, fake_api):
        webhook = {"id": "webhook-123", "url": "https://example.com/hook", "status": "active"}
        fake_api.respond(201, webhook)

        result = client.webhooks.create(
            CreateWebhookRequest(url="https://example.com/hook", events=["video.completed"])
        )

        assert result.data == webhook
        assert fake_api.last.method == "POST"
        assert fake_api.last.url.path == "/v2/webhooks"
        assert fake_api.last_json() == {
            "url": "https://example.com/hook",
            "events": ["video.completed"],
        }

    def test_list_with_params(self, client, fake_api):
        fake_api.respond(200, {"webhooks": []})

        client.webhooks.list(ListWebhooksRequest(limit=5, offset=10, deleted=False))

        params = fake_api.last.url.params
        assert params["limit"] == "5"
        assert params["offset"] == "10"
        assert params["deleted"] == "false"

    def test_get(self, client, fake_api):
        fake_api.respond(200, {"id": "webhook-123", "secret": "s3cret"})

        client.webhooks.get("webhook-123")

        assert fake_api.last.method == "GET"
        assert fake_api.last.url.path == "/v2/webhooks/webhook-123"

    def test_update_sends_only_set_fields(self, client, fake_api):
        fake_api.respond(200, {"id": "webhook-123"})

        client.webhooks.update("webhook-123", UpdateWebhookRequest(events=["video.failed"]))

        assert fake_api.last.method == "PATCH"
        assert fake_api.last_json() == {"events": ["video.failed"]}

    def test_delete(self, client, fake_api):
        fake_api.respond(204)

        client.webhooks.delete("webhook-123")

        assert fake_api.last.method == "DELETE"
        assert fake_api.last.url.path == "/v2/webhooks/webhook-123"


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------


class TestUploads:

    def test_upload_asset_sends_raw_bytes(self, client, fake_api):
        fake_api.respond(201, {"id": "asset-1", "title": "blue.svg"})

        result = client.uploads.upload_asset(
            UploadAssetRequest(file=b"<svg/>", content_type="image/svg+xml")
        )

        assert result.data == {"id": "asset-1", "title": "blue.svg"}
        assert fake_api.last.method == "POST"
        assert fake_api.last.url.host == "upload.api.synthesia.io"
        assert fake_api.last.url.path == "/v2/assets"
        assert fake_api.last.headers["Content-Type"] == "image/svg+xml"
        assert fake_api.last.headers["Authorization"] == "test-api-key"
        assert fake_api.last.content == b"<svg/>"

    def test_upload_video(self, client, fake_api):
        fake_api.respond(201, {"id": "asset-2"})

        client.uploads.upload_video(b"mp4", "video/webm")

        assert fake_api.last.headers["Content-Type"] == "video/webm"

    def test_upload_script_audio(self, client, fake_api):
        fake_api.respond(201, {"id": "audio-1"})

        result = client.uploads.upload_script_audio(b"ID3")

        assert result.data == {"id": "audio-1"}
        assert fake_api.last.url.host == "upload.api.synthesia.io"
        assert fake_api.last.url.path == "/v2/scriptAudio"
        assert fake_api.last.headers["Content-Type"] == "audio/mpeg"
        assert fake_api.last.content == b"ID3"

    def test_upload_script_audio_auth_error(self, client, fake_api):
        fake_api.respond(401, {"error": "Missing or invalid Authorization header"})

        result = client.uploads.upload_script_audio(b"ID3")

        assert result.error.status_code == 401
        assert result.error.message == "Missing or invalid Authorization header"

    def test_upload_file_guesses_content_type(self, client, fake_api, tmp_path: Path):
        image = tmp_path / "logo.png"
        image.write_bytes(b"\x89PNG")
        fake_api.respond(201, {"id": "asset-3"})

        client.uploads.upload_file(image)

        assert fake_api.last.headers["Content-Type"] == "image/png"
        assert fake_api.last.content == b"\x89PNG"

    def test_upload_file_missing(self, client, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            client.uploads.upload_file(tmp_path / "nope.png")

    def test_upload_file_unknown_extension(self, client, tmp_path: Path):
        blob = tmp_path / "asset.unknownext"
        blob.write_bytes(b"data")

        with pytest.raises(ValueError):
            client.uploads.upload_file(blob)
