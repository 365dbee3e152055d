from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int
    body: str | None = None
    details: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class ValidationError(ApiError):
    pass


class AuthError(ApiError):
    """401: the admin API key is missing or invalid."""


class ForbiddenError(ApiError):
    """403: the key lacks the scope for this operation."""


class NotFoundError(ApiError):
    pass


class ConflictError(ApiError):
    """409 or conflict-style errors."""


class RateLimitError(ApiError):
    """429 throttling error."""


class ServerError(ApiError):
    """5xx server-side failures."""


class SerializationError(ApiError):
    """The request payload could not be encoded as JSON."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class ResponseReadError(ApiError):
    """A response arrived but its body could not be read."""


class DeserializationError(ApiError):
    """The response body is not the JSON shape the operation expects."""


class ResourceNotFoundError(NotFoundError):
    """A client-side lookup over a listing found no matching entry."""


@dataclass
class ReadAfterWriteError(ApiError):
    """The mutation was applied, but reading the result back failed.

    ``cause`` is the error raised by the follow-up read. Callers that only
    need the side effect can treat this as success.
    """

    cause: ApiError | None = None
