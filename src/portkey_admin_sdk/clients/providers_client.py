from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import coerce_request, parse_response
from ..models_providers import CreateProviderRequest, CreateProviderResponse, Provider, UpdateProviderRequest
from .base import BaseClient, workspace_params


@dataclass
class ProvidersClient(BaseClient):
    def create_provider(self, payload: CreateProviderRequest | Mapping[str, Any]) -> CreateProviderResponse:
        body = self._send("POST", "/providers", payload, CreateProviderRequest)
        return parse_response(body, CreateProviderResponse)

    def get_provider(self, provider_id: str, workspace_id: str | None = None) -> Provider:
        return self._fetch(Provider, f"/providers/{provider_id}", params=workspace_params(workspace_id))

    def list_providers(self, workspace_id: str | None = None) -> list[Provider]:
        return self._fetch_list(Provider, "/providers", params=workspace_params(workspace_id))

    def update_provider(self, provider_id: str, payload: UpdateProviderRequest | Mapping[str, Any]) -> Provider:
        request = coerce_request(payload, UpdateProviderRequest)
        self._send("PUT", f"/providers/{provider_id}", request, UpdateProviderRequest)
        return self._read_after_write(
            "provider updated",
            lambda: self.get_provider(provider_id, request.workspace_id),
        )

    def delete_provider(self, provider_id: str, workspace_id: str | None = None) -> None:
        self._request("DELETE", f"/providers/{provider_id}", params=workspace_params(workspace_id))
