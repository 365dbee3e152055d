from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from ..exceptions import ApiError, ReadAfterWriteError, ResourceNotFoundError
from ..http_client import HttpClient
from ..models import ListEnvelope, ModelT, RequestModel, parse_response, request_payload

logger = logging.getLogger(__name__)


@dataclass
class BaseClient:
    http: HttpClient

    def _request(self, method: str, path: str, **kwargs: Any) -> bytes:
        return self.http.request(method, path, **kwargs)

    def _send(
        self,
        method: str,
        path: str,
        payload: RequestModel | Mapping[str, Any],
        request_type: type[RequestModel],
        **kwargs: Any,
    ) -> bytes:
        return self._request(method, path, json_body=request_payload(payload, request_type), **kwargs)

    def _fetch(self, model_type: type[ModelT], path: str, **kwargs: Any) -> ModelT:
        return parse_response(self._request("GET", path, **kwargs), model_type)

    def _fetch_list(self, model_type: type[ModelT], path: str, *, params: Mapping[str, str] | None = None) -> list[ModelT]:
        body = self._request("GET", path, params=params)
        envelope = parse_response(body, ListEnvelope[model_type])
        return envelope.data or []

    def _read_after_write(self, what: str, read: Callable[[], ModelT]) -> ModelT:
        try:
            return read()
        except ApiError as exc:
            logger.warning("%s but the follow-up read failed: %s", what, exc)
            raise ReadAfterWriteError(
                code="READ_AFTER_WRITE_FAILED",
                message=f"{what} but failed to retrieve details: {exc}",
                status_code=exc.status_code,
                body=exc.body,
                details=exc.details,
                cause=exc,
            ) from exc


def workspace_params(workspace_id: str | None) -> dict[str, str] | None:
    return {"workspace_id": workspace_id} if workspace_id else None


def find_one(items: Iterable[ModelT], match: Callable[[ModelT], bool], description: str) -> ModelT:
    for item in items:
        if match(item):
            return item
    raise ResourceNotFoundError(
        code="NOT_FOUND",
        message=f"{description} not found",
        status_code=0,
    )
