from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from .models import RequestModel, ResponseModel


def _normalize_config_field(value: Any) -> tuple[dict[str, Any] | None, str | None]:
    # The API returns `config` either as a JSON-encoded string or as an object.
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return None, value
        if not isinstance(parsed, dict):
            return None, value
        value = parsed
    if isinstance(value, dict):
        return value, json.dumps(value, sort_keys=True, separators=(",", ":"))
    return None, None


class Config(ResponseModel):
    """A gateway config.

    ``config`` is always the parsed mapping and ``config_raw`` its JSON text,
    whichever form the server sent.
    """

    id: str = ""
    slug: str = ""
    name: str = ""
    config: dict[str, Any] | None = None
    config_raw: str | None = None
    workspace_id: str | None = None
    organisation_id: str | None = None
    is_default: int = 0
    status: str = ""
    owner_id: str | None = None
    updated_by: str | None = None
    format: str | None = None
    type: str | None = None
    version_id: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_config(cls, data: Any) -> Any:
        if isinstance(data, dict) and "config" in data:
            data = dict(data)
            data["config"], data["config_raw"] = _normalize_config_field(data["config"])
        return data


class CreateConfigRequest(RequestModel):
    name: str
    config: dict[str, Any]
    workspace_id: str | None = None
    is_default: int | None = Field(default=None, alias="isDefault")


class CreateConfigResponse(ResponseModel):
    id: str = ""
    slug: str = ""
    version_id: str | None = None


class UpdateConfigRequest(RequestModel):
    name: str | None = None
    config: dict[str, Any] | None = None
    status: str | None = None


class UpdateConfigResponse(ResponseModel):
    version_id: str | None = None
