from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import parse_response
from ..models_guardrails import (
    CreateGuardrailRequest,
    CreateGuardrailResponse,
    Guardrail,
    UpdateGuardrailRequest,
)
from .base import BaseClient, workspace_params


@dataclass
class GuardrailsClient(BaseClient):
    def create_guardrail(self, payload: CreateGuardrailRequest | Mapping[str, Any]) -> CreateGuardrailResponse:
        body = self._send("POST", "/guardrails", payload, CreateGuardrailRequest)
        return parse_response(body, CreateGuardrailResponse)

    def get_guardrail(self, slug_or_id: str) -> Guardrail:
        return self._fetch(Guardrail, f"/guardrails/{slug_or_id}")

    def list_guardrails(self, workspace_id: str | None = None) -> list[Guardrail]:
        return self._fetch_list(Guardrail, "/guardrails", params=workspace_params(workspace_id))

    def update_guardrail(self, slug_or_id: str, payload: UpdateGuardrailRequest | Mapping[str, Any]) -> Guardrail:
        self._send("PUT", f"/guardrails/{slug_or_id}", payload, UpdateGuardrailRequest)
        return self._read_after_write("guardrail updated", lambda: self.get_guardrail(slug_or_id))

    def delete_guardrail(self, slug_or_id: str) -> None:
        self._request("DELETE", f"/guardrails/{slug_or_id}")
