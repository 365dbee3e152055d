from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import ModelT, parse_response
from ..models_prompts import (
    CreatePromptRequest,
    CreatePromptResponse,
    MakeDefaultRequest,
    Prompt,
    UpdatePromptRequest,
    UpdatePromptResponse,
)
from .base import BaseClient


def parse_version_response(body: bytes, model_type: type[ModelT]) -> ModelT:
    # Name-only updates answer with `{}` or nothing at all.
    if not body.strip():
        return model_type()
    return parse_response(body, model_type)


@dataclass
class PromptsClient(BaseClient):
    def create_prompt(self, payload: CreatePromptRequest | Mapping[str, Any]) -> CreatePromptResponse:
        body = self._send("POST", "/prompts", payload, CreatePromptRequest)
        return parse_response(body, CreatePromptResponse)

    def get_prompt(self, slug_or_id: str, version: str | int | None = None) -> Prompt:
        params = {"version": str(version)} if version not in (None, "") else None
        return self._fetch(Prompt, f"/prompts/{slug_or_id}", params=params)

    def list_prompts(self, workspace_id: str | None = None, collection_id: str | None = None) -> list[Prompt]:
        params: dict[str, str] = {}
        if workspace_id:
            params["workspace_id"] = workspace_id
        if collection_id:
            params["collection_id"] = collection_id
        return self._fetch_list(Prompt, "/prompts", params=params or None)

    def update_prompt(self, slug_or_id: str, payload: UpdatePromptRequest | Mapping[str, Any]) -> UpdatePromptResponse:
        """Update a prompt; template changes publish a new version."""
        body = self._send("PUT", f"/prompts/{slug_or_id}", payload, UpdatePromptRequest)
        return parse_version_response(body, UpdatePromptResponse)

    def make_default(self, slug_or_id: str, version: int) -> None:
        self._send("PUT", f"/prompts/{slug_or_id}/makeDefault", MakeDefaultRequest(version=version), MakeDefaultRequest)

    def delete_prompt(self, slug_or_id: str) -> None:
        self._request("DELETE", f"/prompts/{slug_or_id}")
