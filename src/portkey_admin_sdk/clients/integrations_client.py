from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..models import coerce_request, parse_response
from ..models_integrations import (
    BulkUpdateModelsRequest,
    BulkUpdateWorkspacesRequest,
    CreateIntegrationRequest,
    CreateIntegrationResponse,
    DeleteModelsRequest,
    Integration,
    IntegrationModel,
    IntegrationModelsResponse,
    IntegrationWorkspace,
    IntegrationWorkspacesResponse,
    UpdateIntegrationRequest,
    WorkspaceUpdateRequest,
)
from .base import BaseClient, find_one


@dataclass
class IntegrationsClient(BaseClient):
    def create_integration(self, payload: CreateIntegrationRequest | Mapping[str, Any]) -> CreateIntegrationResponse:
        body = self._send("POST", "/integrations", payload, CreateIntegrationRequest)
        return parse_response(body, CreateIntegrationResponse)

    def get_integration(self, slug: str) -> Integration:
        return self._fetch(Integration, f"/integrations/{slug}")

    def list_integrations(self) -> list[Integration]:
        return self._fetch_list(Integration, "/integrations")

    def update_integration(self, slug: str, payload: UpdateIntegrationRequest | Mapping[str, Any]) -> Integration:
        self._send("PUT", f"/integrations/{slug}", payload, UpdateIntegrationRequest)
        return self._read_after_write("integration updated", lambda: self.get_integration(slug))

    def delete_integration(self, slug: str) -> None:
        self._request("DELETE", f"/integrations/{slug}")

    # Workspace access

    def list_workspaces(self, slug: str) -> IntegrationWorkspacesResponse:
        return self._fetch(IntegrationWorkspacesResponse, f"/integrations/{slug}/workspaces")

    def get_workspace(self, slug: str, workspace_id: str) -> IntegrationWorkspace:
        # No single-item endpoint exists; scan the listing.
        listing = self.list_workspaces(slug)
        return find_one(
            listing.workspaces or [],
            lambda item: item.id == workspace_id,
            f"workspace {workspace_id} for integration {slug}",
        )

    def update_workspaces(self, slug: str, payload: BulkUpdateWorkspacesRequest | Mapping[str, Any]) -> None:
        self._send("PUT", f"/integrations/{slug}/workspaces", payload, BulkUpdateWorkspacesRequest)

    def update_workspace(self, slug: str, workspace: WorkspaceUpdateRequest | Mapping[str, Any]) -> None:
        item = coerce_request(workspace, WorkspaceUpdateRequest)
        self.update_workspaces(slug, BulkUpdateWorkspacesRequest(workspaces=[item]))

    # Model access

    def list_models(self, slug: str) -> IntegrationModelsResponse:
        return self._fetch(IntegrationModelsResponse, f"/integrations/{slug}/models")

    def get_model(self, slug: str, model_slug: str) -> IntegrationModel:
        listing = self.list_models(slug)
        return find_one(
            listing.models or [],
            lambda item: item.slug == model_slug,
            f"model {model_slug} for integration {slug}",
        )

    def update_models(self, slug: str, payload: BulkUpdateModelsRequest | Mapping[str, Any]) -> None:
        self._send("PUT", f"/integrations/{slug}/models", payload, BulkUpdateModelsRequest)

    def update_model(self, slug: str, model: IntegrationModel | Mapping[str, Any]) -> None:
        item = coerce_request(model, IntegrationModel)
        self.update_models(slug, BulkUpdateModelsRequest(models=[item]))

    def delete_models(self, slug: str, model_slugs: Sequence[str]) -> None:
        payload = DeleteModelsRequest(models=list(model_slugs))
        self._send("DELETE", f"/integrations/{slug}/models", payload, DeleteModelsRequest)
