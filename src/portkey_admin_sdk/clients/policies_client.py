from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_policies import (
    CreatePolicyResponse,
    CreateRateLimitsPolicyRequest,
    CreateUsageLimitsPolicyRequest,
    RateLimitsPolicy,
    UpdateRateLimitsPolicyRequest,
    UpdateUsageLimitsPolicyRequest,
    UsageLimitsPolicy,
)
from .base import BaseClient, workspace_params

USAGE_LIMITS_PATH = "/policies/usage-limits"
RATE_LIMITS_PATH = "/policies/rate-limits"


@dataclass
class UsageLimitsPoliciesClient(BaseClient):
    """Credit budgets applied to keys or workspaces matching a set of conditions."""

    def create_policy(
        self,
        payload: CreateUsageLimitsPolicyRequest | Mapping[str, Any],
    ) -> CreatePolicyResponse:
        body = self._send("POST", USAGE_LIMITS_PATH, payload, CreateUsageLimitsPolicyRequest)
        return parse_response(body, CreatePolicyResponse)

    def get_policy(self, policy_id: str) -> UsageLimitsPolicy:
        return self._fetch(UsageLimitsPolicy, f"{USAGE_LIMITS_PATH}/{policy_id}")

    def list_policies(self, workspace_id: str | None = None) -> list[UsageLimitsPolicy]:
        return self._fetch_list(UsageLimitsPolicy, USAGE_LIMITS_PATH, params=workspace_params(workspace_id))

    def update_policy(
        self,
        policy_id: str,
        payload: UpdateUsageLimitsPolicyRequest | Mapping[str, Any],
    ) -> UsageLimitsPolicy:
        self._send("PUT", f"{USAGE_LIMITS_PATH}/{policy_id}", payload, UpdateUsageLimitsPolicyRequest)
        return self._read_after_write("usage limits policy updated", lambda: self.get_policy(policy_id))

    def delete_policy(self, policy_id: str) -> None:
        self._request("DELETE", f"{USAGE_LIMITS_PATH}/{policy_id}")


@dataclass
class RateLimitsPoliciesClient(BaseClient):
    """Request-rate caps applied to keys or workspaces matching a set of conditions."""

    def create_policy(
        self,
        payload: CreateRateLimitsPolicyRequest | Mapping[str, Any],
    ) -> CreatePolicyResponse:
        body = self._send("POST", RATE_LIMITS_PATH, payload, CreateRateLimitsPolicyRequest)
        return parse_response(body, CreatePolicyResponse)

    def get_policy(self, policy_id: str) -> RateLimitsPolicy:
        return self._fetch(RateLimitsPolicy, f"{RATE_LIMITS_PATH}/{policy_id}")

    def list_policies(self, workspace_id: str | None = None) -> list[RateLimitsPolicy]:
        return self._fetch_list(RateLimitsPolicy, RATE_LIMITS_PATH, params=workspace_params(workspace_id))

    def update_policy(
        self,
        policy_id: str,
        payload: UpdateRateLimitsPolicyRequest | Mapping[str, Any],
    ) -> RateLimitsPolicy:
        self._send("PUT", f"{RATE_LIMITS_PATH}/{policy_id}", payload, UpdateRateLimitsPolicyRequest)
        return self._read_after_write("rate limits policy updated", lambda: self.get_policy(policy_id))

    def delete_policy(self, policy_id: str) -> None:
        self._request("DELETE", f"{RATE_LIMITS_PATH}/{policy_id}")
