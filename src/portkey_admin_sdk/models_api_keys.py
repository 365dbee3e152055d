from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar

from .models import RateLimit, RequestModel, ResponseModel, UsageLimits


class ApiKeyType(str, Enum):
    ORGANISATION = "organisation"
    WORKSPACE = "workspace"


class ApiKeySubType(str, Enum):
    SERVICE = "service"
    USER = "user"


class ApiKeyDefaults(ResponseModel):
    metadata: dict[str, str] | None = None
    config_id: str | None = None
    allow_config_override: bool | None = None


class ApiKey(ResponseModel):
    id: str = ""
    key: str | None = None
    name: str = ""
    description: str | None = None
    type: str = ""
    organisation_id: str = ""
    workspace_id: str | None = None
    user_id: str | None = None
    status: str = ""
    creation_mode: str | None = None
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None
    scopes: list[str] | None = None
    defaults: ApiKeyDefaults | None = None
    alert_emails: list[str] | None = None
    expires_at: datetime | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateApiKeyRequest(RequestModel):
    name: str
    description: str | None = None
    workspace_id: str | None = None
    user_id: str | None = None
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None
    scopes: list[str] | None = None
    defaults: ApiKeyDefaults | None = None
    alert_emails: list[str] | None = None
    expires_at: str | None = None


class CreateApiKeyResponse(ResponseModel):
    id: str = ""
    key: str = ""
    object: str | None = None


class UpdateApiKeyRequest(RequestModel):
    """Leave ``rate_limits``/``usage_limits`` unset to keep them, set ``None`` to clear."""

    tristate_fields: ClassVar[frozenset[str]] = frozenset({"rate_limits", "usage_limits"})

    name: str | None = None
    description: str | None = None
    rate_limits: list[RateLimit] | None = None
    usage_limits: UsageLimits | None = None
    scopes: list[str] | None = None
    defaults: ApiKeyDefaults | None = None
    alert_emails: list[str] | None = None
