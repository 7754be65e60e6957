from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..result import Result
from ..types import (
    CreateWebhookRequest,
    ListWebhooksRequest,
    ListWebhooksResponse,
    UpdateWebhookRequest,
    Webhook,
)

if TYPE_CHECKING:
    from .._http import HttpClient


class Webhooks:
    """Accessed via client.webhooks: register endpoints for video events.

    Inbound deliveries are verified with
    :func:`~synthesia.utils.verify_webhook_signature`.
    """

    def __init__(self, http: "HttpClient"):
        self._http = http

    def create(self, request: CreateWebhookRequest) -> Result[Webhook]:
        """Register *request.url* to receive the given events.

        Args:
            request: Target URL, events (``"video.completed"``,
                ``"video.failed"``) and an optional signing secret.
        """
        return self._http.post("/webhooks", json=request.to_payload())

    def list(self, request: Optional[ListWebhooksRequest] = None) -> Result[ListWebhooksResponse]:
        params = request.to_payload() if request else {}
        return self._http.get("/webhooks", params=params)

    def get(self, webhook_id: str) -> Result[Webhook]:
        return self._http.get(f"/webhooks/{webhook_id}")

    def update(self, webhook_id: str, request: UpdateWebhookRequest) -> Result[Webhook]:
        """Change a webhook's URL, events or secret.  Unset fields are left as-is."""
        return self._http.patch(f"/webhooks/{webhook_id}", json=request.to_payload())

    def delete(self, webhook_id: str) -> Result[None]:
        return self._http.delete(f"/webhooks/{webhook_id}")
