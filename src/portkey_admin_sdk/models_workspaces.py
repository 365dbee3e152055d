from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import ValidationInfo, model_validator

from .models import RequestModel, ResponseModel, WorkspaceRateLimits, WorkspaceUsageLimits

WORKSPACE_ROLE_PREFIX = "ws-"


class WorkspaceDefaults(ResponseModel):
    metadata: dict[str, str] | None = None


class Workspace(ResponseModel):
    id: str = ""
    slug: str | None = None
    name: str = ""
    description: str | None = None
    defaults: WorkspaceDefaults | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None
    usage_limits: list[WorkspaceUsageLimits] | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateWorkspaceRequest(RequestModel):
    name: str
    description: str | None = None
    defaults: WorkspaceDefaults | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None
    usage_limits: list[WorkspaceUsageLimits] | None = None


class UpdateWorkspaceRequest(RequestModel):
    """Leave ``rate_limits``/``usage_limits`` unset to keep them, set ``None`` to clear."""

    tristate_fields: ClassVar[frozenset[str]] = frozenset({"rate_limits", "usage_limits"})

    name: str | None = None
    description: str | None = None
    defaults: WorkspaceDefaults | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None
    usage_limits: list[WorkspaceUsageLimits] | None = None


class DeleteWorkspaceRequest(RequestModel):
    name: str
    force_delete: bool | None = None


class WorkspaceMember(ResponseModel):
    id: str = ""
    user_id: str | None = None
    workspace_id: str | None = None
    role: str = ""
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _backfill_queried_id(cls, data: Any, info: ValidationInfo) -> Any:
        # The single-member endpoint omits the id; the caller passes the user id it asked for.
        queried = (info.context or {}).get("user_id")
        if queried and isinstance(data, dict) and not data.get("id"):
            data = {**data, "id": queried}
        return data

    @model_validator(mode="after")
    def _normalize(self) -> "WorkspaceMember":
        if not self.id and self.user_id:
            self.id = self.user_id
        if self.role.startswith(WORKSPACE_ROLE_PREFIX):
            self.role = self.role[len(WORKSPACE_ROLE_PREFIX):]
        return self


class AddWorkspaceMemberRequest(RequestModel):
    user_id: str
    role: str


class UpdateWorkspaceMemberRequest(RequestModel):
    role: str


class WorkspaceUserItem(RequestModel):
    id: str
    role: str


class AddWorkspaceUsersRequest(RequestModel):
    users: list[WorkspaceUserItem]
