from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_mcp import (
    CreateMcpIntegrationRequest,
    CreateMcpIntegrationResponse,
    McpCapabilitiesUpdateRequest,
    McpCapability,
    McpIntegration,
    McpIntegrationWorkspace,
    McpIntegrationWorkspacesResponse,
    McpIntegrationWorkspacesUpdateRequest,
    McpIntegrationWorkspaceUpdate,
    UpdateMcpIntegrationRequest,
)
from .base import BaseClient, find_one, workspace_params


@dataclass
class McpIntegrationsClient(BaseClient):
    def create_integration(
        self,
        payload: CreateMcpIntegrationRequest | Mapping[str, Any],
    ) -> CreateMcpIntegrationResponse:
        body = self._send("POST", "/mcp-integrations", payload, CreateMcpIntegrationRequest)
        return parse_response(body, CreateMcpIntegrationResponse)

    def get_integration(self, integration_id: str) -> McpIntegration:
        return self._fetch(McpIntegration, f"/mcp-integrations/{integration_id}")

    def list_integrations(self, workspace_id: str | None = None) -> list[McpIntegration]:
        return self._fetch_list(McpIntegration, "/mcp-integrations", params=workspace_params(workspace_id))

    def update_integration(
        self,
        integration_id: str,
        payload: UpdateMcpIntegrationRequest | Mapping[str, Any],
    ) -> McpIntegration:
        self._send("PUT", f"/mcp-integrations/{integration_id}", payload, UpdateMcpIntegrationRequest)
        return self._read_after_write("MCP integration updated", lambda: self.get_integration(integration_id))

    def delete_integration(self, integration_id: str) -> None:
        self._request("DELETE", f"/mcp-integrations/{integration_id}")

    # Capabilities

    def list_capabilities(self, integration_id: str) -> list[McpCapability]:
        return self._fetch_list(McpCapability, f"/mcp-integrations/{integration_id}/capabilities")

    def update_capabilities(
        self,
        integration_id: str,
        payload: McpCapabilitiesUpdateRequest | Mapping[str, Any],
    ) -> None:
        self._send("PUT", f"/mcp-integrations/{integration_id}/capabilities", payload, McpCapabilitiesUpdateRequest)

    # Workspace access

    def list_workspaces(self, integration_id: str) -> list[McpIntegrationWorkspace]:
        response = self._fetch(McpIntegrationWorkspacesResponse, f"/mcp-integrations/{integration_id}/workspaces")
        return response.workspaces or []

    def get_workspace(self, integration_id: str, workspace_id: str) -> McpIntegrationWorkspace:
        return find_one(
            self.list_workspaces(integration_id),
            lambda item: item.id == workspace_id,
            f"workspace {workspace_id} for MCP integration {integration_id}",
        )

    def update_workspace(self, integration_id: str, workspace_id: str, enabled: bool) -> None:
        request = McpIntegrationWorkspacesUpdateRequest(
            workspaces=[McpIntegrationWorkspaceUpdate(id=workspace_id, enabled=enabled)]
        )
        self._send("PUT", f"/mcp-integrations/{integration_id}/workspaces", request, McpIntegrationWorkspacesUpdateRequest)
