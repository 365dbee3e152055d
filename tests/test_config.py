from __future__ import annotations

from pathlib import Path

import pytest

from portkey_admin_sdk.config import DEFAULT_BASE_URL, ClientConfig, ConfigError, load_config


def test_load_config_requires_api_key(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="PORTKEY_API_KEY"):
        load_config(str(tmp_path / "missing.env"))


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PORTKEY_API_KEY", "pk-admin")
    cfg = load_config(str(tmp_path / "missing.env"))

    assert cfg.api_base_url == DEFAULT_BASE_URL
    assert cfg.api_key == "pk-admin"
    assert cfg.timeout_seconds == 30.0
    assert cfg.max_connections == 20
    assert cfg.verify_ssl is True


def test_load_config_reads_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "PORTKEY_API_KEY=pk-from-file\n"
        "PORTKEY_BASE_URL=https://gateway.internal/v1/\n"
        "PORTKEY_TIMEOUT_SECONDS=5\n"
        "PORTKEY_VERIFY_SSL=false\n",
        encoding="utf-8",
    )
    cfg = load_config(str(env_file))

    assert cfg.api_key == "pk-from-file"
    assert cfg.api_base_url == "https://gateway.internal/v1"
    assert cfg.timeout_seconds == 5.0
    assert cfg.verify_ssl is False


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("PORTKEY_TIMEOUT_SECONDS", "0"),
        ("PORTKEY_TIMEOUT_SECONDS", "abc"),
        ("PORTKEY_MAX_CONNECTIONS", "0"),
        ("PORTKEY_MAX_CONNECTIONS", "abc"),
    ],
)
def test_load_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    key: str,
    value: str,
) -> None:
    monkeypatch.setenv("PORTKEY_API_KEY", "pk-admin")
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError, match=key):
        load_config(str(tmp_path / "missing.env"))


@pytest.mark.parametrize(
    ("base_url", "api_key", "snippet"),
    [
        ("", "pk-admin", "base URL cannot be empty"),
        ("   ", "pk-admin", "base URL cannot be empty"),
        ("https://api.example.com/v1", "", "API key cannot be empty"),
    ],
)
def test_client_config_rejects_empty_values(base_url: str, api_key: str, snippet: str) -> None:
    with pytest.raises(ConfigError, match=snippet):
        ClientConfig(api_base_url=base_url, api_key=api_key)


def test_client_config_hides_api_key_from_repr() -> None:
    cfg = ClientConfig(api_base_url="https://api.example.com/v1", api_key="pk-secret")

    assert "pk-secret" not in repr(cfg)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("yes", True), ("ON", True), ("0", False), ("no", False), ("  ", True)],
)
def test_load_config_reads_verify_ssl_flag(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    value: str,
    expected: bool,
) -> None:
    monkeypatch.setenv("PORTKEY_API_KEY", "pk-admin")
    monkeypatch.setenv("PORTKEY_VERIFY_SSL", value)

    assert load_config(str(tmp_path / "missing.env")).verify_ssl is expected
