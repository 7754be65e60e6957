"""
End-to-end SDK example: create a video from a template and wait for it.

Run from the synthesia-python directory:
    SYNTHESIA_API_KEY=... .venv/bin/python example.py <template-id>
"""
import logging
import os
import sys

import synthesia
from synthesia import CreateWebhookRequest, PollTimeout, Synthesia
from synthesia.utils import format_error_message, is_rate_limited

# ── logging ──────────────────────────────────────────────────────────────────
# The SDK emits logs under the "synthesia" logger.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    datefmt="%H:%M:%S",
)
# Uncomment to see every HTTP request/response:
# logging.getLogger("synthesia").setLevel(logging.DEBUG)

print(f"\nsynthesia SDK v{synthesia.__version__}")
print("=" * 60)

template_id = sys.argv[1] if len(sys.argv) > 1 else "template-123"

with Synthesia(api_key=os.environ["SYNTHESIA_API_KEY"]) as client:

    # ── step 1 · inspect template ────────────────────────────────────────────
    print(f"\n[1/4] Fetching template {template_id!r}")
    result = client.templates.get(template_id)
    if result.error:
        sys.exit(f"      ✗ {format_error_message(result.error)}")
    for variable in result.data.get("variables", []):
        print(f"      → {variable['name']} ({variable.get('type')})")

    # ── step 2 · register webhook ────────────────────────────────────────────
    print("\n[2/4] Registering webhook")
    result = client.webhooks.create(
        CreateWebhookRequest(
            url="https://your-app.example.com/webhooks/synthesia",
            events=["video.completed", "video.failed"],
            secret="your-webhook-secret",
        )
    )
    if result.error:
        print(f"      ✗ {format_error_message(result.error)} (continuing)")
    else:
        print(f"      → webhook.id = {result.data['id']!r}")

    # ── step 3 · create video ────────────────────────────────────────────────
    print("\n[3/4] Creating video from template")
    result = client.videos.create_from_template(
        template_id,
        {"name": "Ada", "company": "Example Corp"},
        title="SDK example",
        test=True,
    )
    if result.error:
        if is_rate_limited(result.error):
            print(f"      rate limit: {client.get_rate_limit_info()}")
        sys.exit(f"      ✗ {format_error_message(result.error)}")
    video_id = result.data["id"]
    print(f"      → video.id = {video_id!r}")

    # ── step 4 · wait ────────────────────────────────────────────────────────
    print("\n[4/4] Waiting for rendering")
    try:
        status = client.videos.wait_for_completion(
            video_id,
            interval_ms=15_000,
            on_status_update=lambda s: print(f"      status: {s}"),
        )
    except PollTimeout as exc:
        sys.exit(f"      ✗ {exc}")

    if status == "complete":
        video = client.videos.get(video_id).unwrap()
        print(f"      ✓ download: {video.get('download')}")
    else:
        print("      ✗ rendering failed")
