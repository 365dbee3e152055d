from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_mcp import (
    CreateMcpServerRequest,
    CreateMcpServerResponse,
    McpCapabilitiesUpdateRequest,
    McpCapability,
    McpServer,
    McpServerUserAccess,
    McpServerUserAccessResponse,
    McpServerUserAccessUpdate,
    McpServerUserAccessUpdateRequest,
    UpdateMcpServerRequest,
)
from .base import BaseClient, find_one, workspace_params


@dataclass
class McpServersClient(BaseClient):
    """Workspace-level MCP servers built on top of an MCP integration."""

    def create_server(self, payload: CreateMcpServerRequest | Mapping[str, Any]) -> CreateMcpServerResponse:
        body = self._send("POST", "/mcp-servers", payload, CreateMcpServerRequest)
        return parse_response(body, CreateMcpServerResponse)

    def get_server(self, server_id: str) -> McpServer:
        return self._fetch(McpServer, f"/mcp-servers/{server_id}")

    def list_servers(self, workspace_id: str | None = None) -> list[McpServer]:
        return self._fetch_list(McpServer, "/mcp-servers", params=workspace_params(workspace_id))

    def update_server(self, server_id: str, payload: UpdateMcpServerRequest | Mapping[str, Any]) -> McpServer:
        self._send("PUT", f"/mcp-servers/{server_id}", payload, UpdateMcpServerRequest)
        return self._read_after_write("MCP server updated", lambda: self.get_server(server_id))

    def delete_server(self, server_id: str) -> None:
        self._request("DELETE", f"/mcp-servers/{server_id}")

    def list_capabilities(self, server_id: str) -> list[McpCapability]:
        return self._fetch_list(McpCapability, f"/mcp-servers/{server_id}/capabilities")

    def update_capabilities(self, server_id: str, payload: McpCapabilitiesUpdateRequest | Mapping[str, Any]) -> None:
        self._send("PUT", f"/mcp-servers/{server_id}/capabilities", payload, McpCapabilitiesUpdateRequest)

    # User access

    def list_user_access(self, server_id: str) -> list[McpServerUserAccess]:
        response = self._fetch(McpServerUserAccessResponse, f"/mcp-servers/{server_id}/users")
        return response.users or []

    def get_user_access(self, server_id: str, user_id: str) -> McpServerUserAccess:
        return find_one(
            self.list_user_access(server_id),
            lambda item: item.user_id == user_id,
            f"user {user_id} for MCP server {server_id}",
        )

    def update_user_access(
        self,
        server_id: str,
        payload: McpServerUserAccessUpdateRequest | Mapping[str, Any],
    ) -> None:
        self._send("PUT", f"/mcp-servers/{server_id}/users", payload, McpServerUserAccessUpdateRequest)

    def update_user(self, server_id: str, user_id: str, enabled: bool) -> None:
        request = McpServerUserAccessUpdateRequest(
            users=[McpServerUserAccessUpdate(user_id=user_id, enabled=enabled)]
        )
        self.update_user_access(server_id, request)
