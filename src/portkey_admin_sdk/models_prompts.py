from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from .models import RequestModel, ResponseModel


class Prompt(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    collection_id: str = ""
    string: str = ""
    parameters: dict[str, Any] | None = None
    model: str | None = None
    virtual_key: str | None = None
    functions: list[Any] | None = None
    tools: list[Any] | None = None
    tool_choice: Any = None
    template_metadata: dict[str, Any] | None = None
    is_raw_template: int = 0
    prompt_version: int = 0
    prompt_version_id: str | None = None
    prompt_version_status: str | None = None
    prompt_version_description: str | None = None
    status: str = ""
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreatePromptRequest(RequestModel):
    name: str
    collection_id: str
    string: str
    virtual_key: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    model: str | None = None
    version_description: str | None = None
    template_metadata: dict[str, Any] | None = None


class CreatePromptResponse(ResponseModel):
    id: str = ""
    slug: str = ""
    version_id: str | None = None


class UpdatePromptRequest(RequestModel):
    """Updating anything besides ``name`` creates a new prompt version.

    ``parameters`` is always sent, as ``null`` when not given, because the API
    expects the key when it cuts a version.
    """

    required_keys: ClassVar[frozenset[str]] = frozenset({"parameters"})

    name: str | None = None
    collection_id: str | None = None
    string: str | None = None
    parameters: dict[str, Any] | None = None
    model: str | None = None
    virtual_key: str | None = None
    version_description: str | None = None
    template_metadata: dict[str, Any] | None = None
    is_raw_template: int | None = None


class UpdatePromptResponse(ResponseModel):
    id: str | None = None
    slug: str | None = None
    prompt_version_id: str | None = None


class MakeDefaultRequest(RequestModel):
    version: int


# Partials


class PromptPartial(ResponseModel):
    id: str = ""
    slug: str = ""
    name: str = ""
    string: str = ""
    status: str = ""
    version: int = 0
    prompt_partial_version_id: str | None = None
    prompt_partial_version_status: str | None = None
    version_description: str | None = None
    collection_id: str | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


class CreatePromptPartialRequest(RequestModel):
    name: str
    string: str
    workspace_id: str | None = None
    version_description: str | None = None


class CreatePromptPartialResponse(ResponseModel):
    id: str = ""
    slug: str = ""
    version_id: str | None = None


class UpdatePromptPartialRequest(RequestModel):
    name: str | None = None
    string: str | None = None
    version_description: str | None = None


class UpdatePromptPartialResponse(ResponseModel):
    id: str | None = None
    slug: str | None = None
    prompt_partial_version_id: str | None = None


# Collections


class PromptCollection(ResponseModel):
    id: str = ""
    name: str = ""
    workspace_id: str = ""
    slug: str | None = None
    parent_collection_id: str | None = None
    is_default: int = 0
    status: str = ""
    created_at: str | None = None
    last_updated_at: str | None = None


class CreatePromptCollectionRequest(RequestModel):
    name: str
    workspace_id: str
    parent_collection_id: str | None = None


class CreatePromptCollectionResponse(ResponseModel):
    id: str = ""
    slug: str = ""


class UpdatePromptCollectionRequest(RequestModel):
    name: str | None = None
