"""Shared model plumbing: request serialization, response decoding, limits."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Mapping, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict

from .exceptions import DeserializationError, SerializationError

ModelT = TypeVar("ModelT", bound=BaseModel)
ItemT = TypeVar("ItemT")


class RequestModel(BaseModel):
    """Base for request payloads.

    ``None`` means "leave the key out", matching how the API treats absent
    fields. Names in ``tristate_fields`` are decided by whether the caller set
    them instead: unset is omitted, ``None`` is sent as JSON ``null`` (clear)
    and anything else is sent as the new value (replace). Names in
    ``required_keys`` are always present, as ``null`` when empty.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tristate_fields: ClassVar[frozenset[str]] = frozenset()
    required_keys: ClassVar[frozenset[str]] = frozenset()

    def to_payload(self) -> dict[str, Any]:
        dumped = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        # Keys follow field declaration order so the encoded body is stable.
        payload: dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            key = info.alias or name
            if name in self.tristate_fields and name not in self.model_fields_set:
                continue
            if key in dumped:
                payload[key] = dumped[key]
            elif name in self.tristate_fields or name in self.required_keys:
                payload[key] = None
        return payload


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ListEnvelope(BaseModel, Generic[ItemT]):
    model_config = ConfigDict(extra="allow")

    data: list[ItemT] | None = None


def coerce_request(value: BaseModel | Mapping[str, Any], model_type: type[ModelT]) -> ModelT:
    if isinstance(value, model_type):
        return value
    try:
        return model_type.model_validate(value)
    except pydantic.ValidationError as exc:
        raise SerializationError(
            code="SERIALIZATION_ERROR",
            message=f"invalid {model_type.__name__}: {exc}",
            status_code=0,
            details=exc.errors(include_url=False),
        ) from exc


def request_payload(value: RequestModel | Mapping[str, Any], model_type: type[RequestModel]) -> dict[str, Any]:
    return coerce_request(value, model_type).to_payload()


def parse_response(body: bytes, model_type: type[ModelT], context: dict[str, Any] | None = None) -> ModelT:
    try:
        return model_type.model_validate_json(body, context=context)
    except pydantic.ValidationError as exc:
        raise DeserializationError(
            code="DESERIALIZATION_ERROR",
            message=f"error unmarshaling response into {model_type.__name__}: {exc}",
            status_code=0,
            body=body.decode("utf-8", errors="replace"),
            details=exc.errors(include_url=False),
        ) from exc


# Limits in the API-key/provider shape.


class RateLimit(ResponseModel):
    type: str | None = None
    unit: str | None = None
    value: int | None = None


class UsageLimits(ResponseModel):
    credit_limit: int | None = None
    alert_threshold: int | None = None
    periodic_reset: str | None = None


# Limits in the workspace shape (workspaces and integration workspace access).


class WorkspaceUsageLimits(ResponseModel):
    type: str | None = None
    credit_limit: int | None = None
    alert_threshold: int | None = None
    periodic_reset: str | None = None


class WorkspaceRateLimits(ResponseModel):
    type: str | None = None
    unit: str | None = None
    value: int | None = None
