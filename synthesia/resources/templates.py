from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..result import Result
from ..types import ListTemplatesRequest, ListTemplatesResponse, Template

if TYPE_CHECKING:
    from .._http import HttpClient


class Templates:
    """Accessed via client.templates: read-only access to video templates."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    def list(self, request: Optional[ListTemplatesRequest] = None) -> Result[ListTemplatesResponse]:
        """List templates.

        Args:
            request: Optional filter.  ``source="synthesia"`` returns the
                stock templates, ``source="workspace"`` your own.
        """
        params = request.to_payload() if request else {}
        return self._http.get("/templates", params=params)

    def get(self, template_id: str) -> Result[Template]:
        """Fetch a template, including the variables it expects."""
        return self._http.get(f"/templates/{template_id}")

    def list_synthesia(self) -> Result[ListTemplatesResponse]:
        return self.list(ListTemplatesRequest(source="synthesia"))

    def list_workspace(self) -> Result[ListTemplatesResponse]:
        return self.list(ListTemplatesRequest(source="workspace"))
