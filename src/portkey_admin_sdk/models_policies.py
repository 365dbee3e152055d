from __future__ import annotations

from datetime import datetime

from .models import RequestModel, ResponseModel


class PolicyCondition(ResponseModel):
    key: str = ""
    value: str = ""


class PolicyGroupBy(ResponseModel):
    key: str = ""


class UsageLimitsPolicy(ResponseModel):
    id: str = ""
    name: str | None = None
    conditions: list[PolicyCondition] | None = None
    group_by: list[PolicyGroupBy] | None = None
    type: str = ""
    credit_limit: float = 0
    alert_threshold: float | None = None
    periodic_reset: str | None = None
    status: str = ""
    workspace_id: str | None = None
    organisation_id: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateUsageLimitsPolicyRequest(RequestModel):
    conditions: list[PolicyCondition]
    group_by: list[PolicyGroupBy]
    type: str
    credit_limit: float
    name: str | None = None
    workspace_id: str | None = None
    organisation_id: str | None = None
    alert_threshold: float | None = None
    periodic_reset: str | None = None


class UpdateUsageLimitsPolicyRequest(RequestModel):
    name: str | None = None
    credit_limit: float | None = None
    alert_threshold: float | None = None
    status: str | None = None


class RateLimitsPolicy(ResponseModel):
    id: str = ""
    name: str | None = None
    conditions: list[PolicyCondition] | None = None
    group_by: list[PolicyGroupBy] | None = None
    type: str = ""
    unit: str = ""
    value: float = 0
    status: str = ""
    workspace_id: str | None = None
    organisation_id: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateRateLimitsPolicyRequest(RequestModel):
    conditions: list[PolicyCondition]
    group_by: list[PolicyGroupBy]
    type: str
    unit: str
    value: float
    name: str | None = None
    workspace_id: str | None = None
    organisation_id: str | None = None


class UpdateRateLimitsPolicyRequest(RequestModel):
    name: str | None = None
    unit: str | None = None
    value: float | None = None
    status: str | None = None


class CreatePolicyResponse(ResponseModel):
    id: str = ""
