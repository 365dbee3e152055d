from __future__ import annotations

import pytest

from portkey_admin_sdk.config import ClientConfig
from portkey_admin_sdk.http_client import HttpClient

BASE_URL = "https://api.example.com/v1"


def _cfg(**overrides: object) -> ClientConfig:
    values: dict[str, object] = {"api_base_url": BASE_URL, "api_key": "pk-admin-test"}
    values.update(overrides)
    return ClientConfig(**values)


@pytest.fixture
def http() -> HttpClient:
    return HttpClient(_cfg())


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "PORTKEY_API_KEY",
        "PORTKEY_BASE_URL",
        "PORTKEY_TIMEOUT_SECONDS",
        "PORTKEY_MAX_CONNECTIONS",
        "PORTKEY_VERIFY_SSL",
    ):
        # Registers the key so values loaded from .env files are undone too.
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
