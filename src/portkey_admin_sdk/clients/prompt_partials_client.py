from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_prompts import (
    CreatePromptPartialRequest,
    CreatePromptPartialResponse,
    MakeDefaultRequest,
    PromptPartial,
    UpdatePromptPartialRequest,
    UpdatePromptPartialResponse,
)
from .base import BaseClient, workspace_params
from .prompts_client import parse_version_response


@dataclass
class PromptPartialsClient(BaseClient):
    def create_partial(self, payload: CreatePromptPartialRequest | Mapping[str, Any]) -> CreatePromptPartialResponse:
        body = self._send("POST", "/prompts/partials", payload, CreatePromptPartialRequest)
        return parse_response(body, CreatePromptPartialResponse)

    def get_partial(self, slug_or_id: str, version: str | int | None = None) -> PromptPartial:
        params = {"version": str(version)} if version not in (None, "") else None
        return self._fetch(PromptPartial, f"/prompts/partials/{slug_or_id}", params=params)

    def list_partials(self, workspace_id: str | None = None) -> list[PromptPartial]:
        return self._fetch_list(PromptPartial, "/prompts/partials", params=workspace_params(workspace_id))

    def update_partial(
        self,
        slug_or_id: str,
        payload: UpdatePromptPartialRequest | Mapping[str, Any],
    ) -> UpdatePromptPartialResponse:
        body = self._send("PUT", f"/prompts/partials/{slug_or_id}", payload, UpdatePromptPartialRequest)
        return parse_version_response(body, UpdatePromptPartialResponse)

    def make_default(self, slug_or_id: str, version: int) -> None:
        self._send(
            "PUT",
            f"/prompts/partials/{slug_or_id}/makeDefault",
            MakeDefaultRequest(version=version),
            MakeDefaultRequest,
        )

    def delete_partial(self, slug_or_id: str) -> None:
        self._request("DELETE", f"/prompts/partials/{slug_or_id}")
