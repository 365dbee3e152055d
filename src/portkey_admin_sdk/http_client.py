from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Mapping

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.exceptions import ReadTimeoutError

from .config import ClientConfig, ConfigError
from .error_mapper import map_error
from .exceptions import ResponseReadError, SerializationError, TransportError

API_KEY_HEADER = "x-portkey-api-key"
READ_CHUNK_SIZE = 64 * 1024

logger = logging.getLogger(__name__)


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    @property
    def effective_timeout(self) -> float:
        if self.timeout_seconds is None:
            return self.config.timeout_seconds
        return min(self.timeout_seconds, self.config.timeout_seconds)

    def with_timeout(self, seconds: float) -> "HttpClient":
        """Return a client sharing this session with a tighter deadline.

        The configured timeout stays the upper bound, so a caller can only
        shorten it.
        """
        if seconds <= 0:
            raise ConfigError(f"Invalid timeout: expected > 0, got {seconds}")
        return replace(self, timeout_seconds=seconds)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def _build_url(self, path: str) -> str:
        return self.config.api_base_url.rstrip("/") + "/" + path.lstrip("/")

    def _encode(self, json_body: Any) -> bytes:
        try:
            return json.dumps(json_body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                code="SERIALIZATION_ERROR",
                message=f"error marshaling request body: {exc}",
                status_code=0,
            ) from exc

    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> bytes:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        data = self._encode(json_body) if json_body is not None else None
        normalized_method = method.upper()
        url = self._build_url(path)
        headers = {
            "Content-Type": "application/json",
            API_KEY_HEADER: self.config.api_key,
        }

        started = time.monotonic()
        deadline = started + self.effective_timeout
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=headers,
                data=data,
                params=params,
                timeout=self.effective_timeout,
                verify=self.config.verify_ssl,
                stream=True,
            )
        except requests.RequestException as exc:
            logger.debug("%s %s failed before a response: %s", normalized_method, path, exc)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=f"error making request: {exc}",
                status_code=0,
                details={"type": type(exc).__name__},
            ) from exc

        with response:
            content = self._read_body(response, deadline)

        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.debug("%s %s -> %s (%d ms)", normalized_method, path, response.status_code, elapsed_ms)

        if not 200 <= response.status_code < 300:
            raise map_error(response.status_code, content.decode("utf-8", errors="replace"))
        return content

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """Read the whole body before ``deadline``.

        ``read1`` performs at most one socket read, and the socket wait is
        shrunk to the time left before each one, so a slowly dripping body
        cannot outlive the deadline.
        """
        raw = response.raw
        chunks: list[bytes] = []
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise self._deadline_exceeded(response.status_code)
            _limit_socket_wait(raw, remaining)
            try:
                chunk = raw.read1(READ_CHUNK_SIZE, decode_content=True)
            except ReadTimeoutError as exc:
                raise self._deadline_exceeded(response.status_code) from exc
            except (urllib3.exceptions.HTTPError, OSError) as exc:
                raise ResponseReadError(
                    code="RESPONSE_READ_ERROR",
                    message=f"error reading response body: {exc}",
                    status_code=response.status_code,
                    details={"type": type(exc).__name__},
                ) from exc
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def _deadline_exceeded(self, status_code: int) -> TransportError:
        return TransportError(
            code="DEADLINE_EXCEEDED",
            message=f"request did not complete within {self.effective_timeout}s",
            status_code=0,
            details={"status_code": status_code},
        )


def _limit_socket_wait(raw: Any, seconds: float) -> None:
    sock = getattr(getattr(raw, "connection", None), "sock", None)
    if sock is not None:
        sock.settimeout(seconds)
