from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_configs import (
    Config,
    CreateConfigRequest,
    CreateConfigResponse,
    UpdateConfigRequest,
    UpdateConfigResponse,
)
from .base import BaseClient, workspace_params


@dataclass
class ConfigsClient(BaseClient):
    def create_config(self, payload: CreateConfigRequest | Mapping[str, Any]) -> CreateConfigResponse:
        body = self._send("POST", "/configs", payload, CreateConfigRequest)
        return parse_response(body, CreateConfigResponse)

    def get_config(self, slug: str) -> Config:
        return self._fetch(Config, f"/configs/{slug}")

    def list_configs(self, workspace_id: str | None = None) -> list[Config]:
        return self._fetch_list(Config, "/configs", params=workspace_params(workspace_id))

    def update_config(self, slug: str, payload: UpdateConfigRequest | Mapping[str, Any]) -> UpdateConfigResponse:
        body = self._send("PUT", f"/configs/{slug}", payload, UpdateConfigRequest)
        return parse_response(body, UpdateConfigResponse)

    def delete_config(self, slug: str) -> None:
        self._request("DELETE", f"/configs/{slug}")
