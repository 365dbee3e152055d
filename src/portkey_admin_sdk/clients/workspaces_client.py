from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import coerce_request, parse_response
from ..models_workspaces import (
    AddWorkspaceMemberRequest,
    AddWorkspaceUsersRequest,
    CreateWorkspaceRequest,
    DeleteWorkspaceRequest,
    UpdateWorkspaceMemberRequest,
    UpdateWorkspaceRequest,
    Workspace,
    WorkspaceMember,
    WorkspaceUserItem,
)
from .base import BaseClient


@dataclass
class WorkspacesClient(BaseClient):
    def create_workspace(self, payload: CreateWorkspaceRequest | Mapping[str, Any]) -> Workspace:
        body = self._send("POST", "/admin/workspaces", payload, CreateWorkspaceRequest)
        return parse_response(body, Workspace)

    def get_workspace(self, workspace_id: str) -> Workspace:
        return self._fetch(Workspace, f"/admin/workspaces/{workspace_id}")

    def list_workspaces(self) -> list[Workspace]:
        return self._fetch_list(Workspace, "/admin/workspaces")

    def update_workspace(
        self,
        workspace_id: str,
        payload: UpdateWorkspaceRequest | Mapping[str, Any],
    ) -> Workspace:
        """Update a workspace and return its refreshed state.

        The update endpoint answers with an empty body, so the workspace is
        read back afterwards.
        """
        self._send("PUT", f"/admin/workspaces/{workspace_id}", payload, UpdateWorkspaceRequest)
        return self._read_after_write("workspace updated", lambda: self.get_workspace(workspace_id))

    def delete_workspace(self, workspace_id: str, name: str, *, force_delete: bool = False) -> None:
        """Delete a workspace.

        The API requires the workspace name as confirmation. It is sent as
        given; a mismatch is rejected by the server.
        """
        payload = DeleteWorkspaceRequest(name=name, force_delete=force_delete or None)
        self._send("DELETE", f"/admin/workspaces/{workspace_id}", payload, DeleteWorkspaceRequest)

    # Members

    def add_member(
        self,
        workspace_id: str,
        payload: AddWorkspaceMemberRequest | Mapping[str, Any],
    ) -> WorkspaceMember:
        request = coerce_request(payload, AddWorkspaceMemberRequest)
        bulk = AddWorkspaceUsersRequest(users=[WorkspaceUserItem(id=request.user_id, role=request.role)])
        self._send("POST", f"/admin/workspaces/{workspace_id}/users", bulk, AddWorkspaceUsersRequest)
        return self._read_after_write(
            "user added",
            lambda: self.get_member(workspace_id, request.user_id),
        )

    def get_member(self, workspace_id: str, user_id: str) -> WorkspaceMember:
        body = self._request("GET", f"/admin/workspaces/{workspace_id}/users/{user_id}")
        return parse_response(body, WorkspaceMember, context={"user_id": user_id})

    def list_members(self, workspace_id: str) -> list[WorkspaceMember]:
        return self._fetch_list(WorkspaceMember, f"/admin/workspaces/{workspace_id}/users")

    def update_member(
        self,
        workspace_id: str,
        user_id: str,
        payload: UpdateWorkspaceMemberRequest | Mapping[str, Any],
    ) -> WorkspaceMember:
        self._send(
            "PUT",
            f"/admin/workspaces/{workspace_id}/users/{user_id}",
            payload,
            UpdateWorkspaceMemberRequest,
        )
        return self._read_after_write("role updated", lambda: self.get_member(workspace_id, user_id))

    def remove_member(self, workspace_id: str, user_id: str) -> None:
        self._request("DELETE", f"/admin/workspaces/{workspace_id}/users/{user_id}")
