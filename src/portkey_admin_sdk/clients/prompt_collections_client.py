from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_prompts import (
    CreatePromptCollectionRequest,
    CreatePromptCollectionResponse,
    PromptCollection,
    UpdatePromptCollectionRequest,
)
from .base import BaseClient, workspace_params


@dataclass
class PromptCollectionsClient(BaseClient):
    def create_collection(
        self,
        payload: CreatePromptCollectionRequest | Mapping[str, Any],
    ) -> CreatePromptCollectionResponse:
        body = self._send("POST", "/collections", payload, CreatePromptCollectionRequest)
        return parse_response(body, CreatePromptCollectionResponse)

    def get_collection(self, collection_id: str) -> PromptCollection:
        return self._fetch(PromptCollection, f"/collections/{collection_id}")

    def list_collections(self, workspace_id: str | None = None) -> list[PromptCollection]:
        return self._fetch_list(PromptCollection, "/collections", params=workspace_params(workspace_id))

    def update_collection(
        self,
        collection_id: str,
        payload: UpdatePromptCollectionRequest | Mapping[str, Any],
    ) -> PromptCollection:
        self._send("PUT", f"/collections/{collection_id}", payload, UpdatePromptCollectionRequest)
        return self._read_after_write("collection updated", lambda: self.get_collection(collection_id))

    def delete_collection(self, collection_id: str) -> None:
        self._request("DELETE", f"/collections/{collection_id}")
