from __future__ import annotations

from datetime import datetime
from typing import Any

from .models import RequestModel, ResponseModel, WorkspaceRateLimits, WorkspaceUsageLimits


class Integration(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    ai_provider_id: str = ""
    description: str | None = None
    status: str = ""
    masked_key: str | None = None
    configurations: dict[str, Any] | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateIntegrationRequest(RequestModel):
    name: str
    ai_provider_id: str
    slug: str | None = None
    key: str | None = None
    description: str | None = None
    configurations: dict[str, Any] | None = None


class CreateIntegrationResponse(ResponseModel):
    id: str = ""
    slug: str = ""


class UpdateIntegrationRequest(RequestModel):
    name: str | None = None
    key: str | None = None
    description: str | None = None
    configurations: dict[str, Any] | None = None


# Workspace access


class IntegrationWorkspace(ResponseModel):
    id: str = ""
    enabled: bool = False
    usage_limits: list[WorkspaceUsageLimits] | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None


class IntegrationWorkspacesResponse(ResponseModel):
    total: int = 0
    workspaces: list[IntegrationWorkspace] | None = None


class WorkspaceUpdateRequest(RequestModel):
    id: str
    enabled: bool
    usage_limits: list[WorkspaceUsageLimits] | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None
    reset_usage: bool | None = None


class GlobalWorkspaceAccess(RequestModel):
    enabled: bool
    usage_limits: list[WorkspaceUsageLimits] | None = None
    rate_limits: list[WorkspaceRateLimits] | None = None


class BulkUpdateWorkspacesRequest(RequestModel):
    workspaces: list[WorkspaceUpdateRequest] | None = None
    global_workspace_access: GlobalWorkspaceAccess | None = None
    override_existing_workspace_access: bool | None = None


# Model access


class TokenPrice(ResponseModel):
    price: float = 0


class PayAsYouGoPricing(ResponseModel):
    request_token: TokenPrice | None = None
    response_token: TokenPrice | None = None


class ModelPricingConfig(ResponseModel):
    type: str = ""
    pay_as_you_go: PayAsYouGoPricing | None = None


class IntegrationModel(ResponseModel):
    slug: str = ""
    enabled: bool = False
    is_custom: bool | None = None
    is_finetune: bool | None = None
    base_model_slug: str | None = None
    pricing_config: ModelPricingConfig | None = None


class IntegrationModelsResponse(ResponseModel):
    allow_all_models: bool = False
    models: list[IntegrationModel] | None = None


class BulkUpdateModelsRequest(RequestModel):
    allow_all_models: bool | None = None
    models: list[IntegrationModel]


class DeleteModelsRequest(RequestModel):
    models: list[str]
