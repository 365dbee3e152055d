from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .models import RequestModel, ResponseModel


class User(ResponseModel):
    id: str = ""
    email: str = ""
    role: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UpdateUserRequest(RequestModel):
    role: str | None = None


class WorkspaceInviteDetails(ResponseModel):
    id: str = ""
    role: str = ""


class ApiKeyScopes(ResponseModel):
    scopes: list[str] = Field(default_factory=list)


class UserInvite(ResponseModel):
    id: str = ""
    email: str = ""
    role: str = ""
    status: str = ""
    workspaces: list[WorkspaceInviteDetails] | None = None
    created_at: datetime | None = None
    expires_at: datetime | None = None


class CreateUserInviteRequest(RequestModel):
    email: str
    role: str
    workspaces: list[WorkspaceInviteDetails] | None = None
    workspace_api_key_details: ApiKeyScopes | None = None
