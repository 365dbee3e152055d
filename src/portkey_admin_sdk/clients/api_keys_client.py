from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_api_keys import (
    ApiKey,
    ApiKeySubType,
    ApiKeyType,
    CreateApiKeyRequest,
    CreateApiKeyResponse,
    UpdateApiKeyRequest,
)
from .base import BaseClient, workspace_params


@dataclass
class ApiKeysClient(BaseClient):
    def create_api_key(
        self,
        key_type: ApiKeyType | str,
        sub_type: ApiKeySubType | str,
        payload: CreateApiKeyRequest | Mapping[str, Any],
    ) -> CreateApiKeyResponse:
        """Create an organisation or workspace key of the service or user kind.

        The secret is only present in this response.
        """
        path = f"/api-keys/{getattr(key_type, 'value', key_type)}/{getattr(sub_type, 'value', sub_type)}"
        body = self._send("POST", path, payload, CreateApiKeyRequest)
        return parse_response(body, CreateApiKeyResponse)

    def get_api_key(self, key_id: str) -> ApiKey:
        return self._fetch(ApiKey, f"/api-keys/{key_id}")

    def list_api_keys(self, workspace_id: str | None = None) -> list[ApiKey]:
        return self._fetch_list(ApiKey, "/api-keys", params=workspace_params(workspace_id))

    def update_api_key(self, key_id: str, payload: UpdateApiKeyRequest | Mapping[str, Any]) -> ApiKey:
        self._send("PUT", f"/api-keys/{key_id}", payload, UpdateApiKeyRequest)
        return self._read_after_write("API key updated", lambda: self.get_api_key(key_id))

    def delete_api_key(self, key_id: str) -> None:
        self._request("DELETE", f"/api-keys/{key_id}")
