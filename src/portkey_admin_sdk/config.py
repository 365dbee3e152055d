from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.portkey.ai/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_CONNECTIONS = 20

NumberT = TypeVar("NumberT", int, float)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str
    api_key: str = field(repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if not (self.api_base_url or "").strip():
            raise ConfigError("base URL cannot be empty")
        if not (self.api_key or "").strip():
            raise ConfigError("API key cannot be empty")
        _check(self.timeout_seconds > 0, f"Invalid timeout: expected > 0, got {self.timeout_seconds}")
        _check(self.max_connections >= 1, f"Invalid max_connections: expected >= 1, got {self.max_connections}")


def _check(ok: bool, message: str) -> None:
    if not ok:
        raise ConfigError(message)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: NumberT, cast: Callable[[str], NumberT], kind: str) -> NumberT:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: expected {kind}, got {raw!r}") from exc


def load_config(env_file: str | None = None) -> ClientConfig:
    """Build a ``ClientConfig`` from ``PORTKEY_*`` variables.

    ``env_file`` is loaded first; variables already set in the process win.
    """
    load_dotenv(env_file)

    api_key = (os.getenv("PORTKEY_API_KEY") or "").strip()
    _check(bool(api_key), "Missing required config value: PORTKEY_API_KEY")
    api_base_url = (os.getenv("PORTKEY_BASE_URL") or "").strip() or DEFAULT_BASE_URL

    timeout_seconds = _env_number("PORTKEY_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float, "a number")
    _check(timeout_seconds > 0, f"Invalid PORTKEY_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}")

    max_connections = _env_number("PORTKEY_MAX_CONNECTIONS", DEFAULT_MAX_CONNECTIONS, int, "an integer")
    _check(max_connections >= 1, f"Invalid PORTKEY_MAX_CONNECTIONS: expected >= 1, got {max_connections}")

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        api_key=api_key,
        timeout_seconds=timeout_seconds,
        max_connections=max_connections,
        verify_ssl=_env_flag("PORTKEY_VERIFY_SSL", True),
    )
