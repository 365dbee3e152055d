from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .models import RateLimit, RequestModel, ResponseModel, UsageLimits


class Provider(ResponseModel):
    """A provider (virtual key) bound to an integration inside a workspace."""

    id: str = ""
    slug: str = ""
    name: str = ""
    ai_provider_name: str | None = None
    integration_id: str | None = None
    workspace_id: str | None = None
    status: str = ""
    note: str | None = None
    provider_model_config: dict[str, Any] | None = Field(default=None, alias="model_config")
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None
    created_at: datetime | None = None
    expires_at: datetime | None = None


class CreateProviderRequest(RequestModel):
    name: str
    workspace_id: str
    integration_id: str
    slug: str | None = None
    note: str | None = None
    provider_model_config: dict[str, Any] | None = Field(default=None, alias="model_config")
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None


class CreateProviderResponse(ResponseModel):
    id: str = ""
    slug: str = ""
    object: str | None = None


class UpdateProviderRequest(RequestModel):
    workspace_id: str
    name: str | None = None
    note: str | None = None
    provider_model_config: dict[str, Any] | None = Field(default=None, alias="model_config")
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None
