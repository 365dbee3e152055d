from __future__ import annotations

from typing import Any

from .models import RequestModel, ResponseModel


class McpCapability(ResponseModel):
    """A tool, resource or prompt exposed by an MCP integration or server."""

    name: str = ""
    type: str = ""
    enabled: bool = True


class McpCapabilitiesUpdateRequest(RequestModel):
    capabilities: list[McpCapability]


# Integrations


class McpIntegration(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    description: str | None = None
    url: str = ""
    auth_type: str = ""
    transport: str = ""
    configurations: Any = None
    workspace_id: str | None = None
    type: str | None = None
    status: str | None = None
    owner_id: str | None = None
    created_at: str | None = None
    last_updated_at: str | None = None
    global_workspace_access: Any = None


class CreateMcpIntegrationRequest(RequestModel):
    name: str
    url: str
    auth_type: str
    transport: str
    slug: str | None = None
    description: str | None = None
    configurations: Any = None
    workspace_id: str | None = None


class CreateMcpIntegrationResponse(ResponseModel):
    id: str = ""
    slug: str = ""


class UpdateMcpIntegrationRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    url: str | None = None
    auth_type: str | None = None
    transport: str | None = None
    configurations: Any = None


class McpIntegrationWorkspace(ResponseModel):
    id: str = ""
    enabled: bool = False


class McpIntegrationWorkspacesResponse(ResponseModel):
    workspaces: list[McpIntegrationWorkspace] | None = None


class McpIntegrationWorkspaceUpdate(RequestModel):
    id: str
    enabled: bool


class McpIntegrationWorkspacesUpdateRequest(RequestModel):
    workspaces: list[McpIntegrationWorkspaceUpdate]


# Servers


class McpServer(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    description: str | None = None
    mcp_integration_id: str = ""
    workspace_id: str | None = None
    status: str | None = None
    created_at: str | None = None
    last_updated_at: str | None = None


class CreateMcpServerRequest(RequestModel):
    name: str
    mcp_integration_id: str
    slug: str | None = None
    description: str | None = None
    workspace_id: str | None = None


class CreateMcpServerResponse(ResponseModel):
    id: str = ""
    slug: str = ""


class UpdateMcpServerRequest(RequestModel):
    name: str | None = None
    description: str | None = None


class McpServerUserAccess(ResponseModel):
    user_id: str = ""
    enabled: bool = False


class McpServerUserAccessResponse(ResponseModel):
    users: list[McpServerUserAccess] | None = None


class McpServerUserAccessUpdate(RequestModel):
    user_id: str
    enabled: bool


class McpServerUserAccessUpdateRequest(RequestModel):
    users: list[McpServerUserAccessUpdate]
