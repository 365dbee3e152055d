from __future__ import annotations

from datetime import datetime
from typing import Any

from .models import RequestModel, ResponseModel


class GuardrailCheck(ResponseModel):
    id: str = ""
    is_enabled: bool | None = None
    parameters: dict[str, Any] | None = None


class Guardrail(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    organisation_id: str | None = None
    workspace_id: str | None = None
    checks: list[GuardrailCheck] | None = None
    actions: dict[str, Any] | None = None
    status: str = ""
    version_id: str | None = None
    owner_id: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreateGuardrailRequest(RequestModel):
    name: str
    checks: list[GuardrailCheck]
    actions: dict[str, Any]
    workspace_id: str | None = None
    organisation_id: str | None = None


class CreateGuardrailResponse(ResponseModel):
    id: str = ""
    slug: str = ""
    version_id: str | None = None


class UpdateGuardrailRequest(RequestModel):
    name: str | None = None
    checks: list[GuardrailCheck] | None = None
    actions: dict[str, Any] | None = None
