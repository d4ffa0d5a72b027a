from __future__ import annotations

import pytest

from bloxfruits_tracker.config import Config
from bloxfruits_tracker.constants import UPSTREAM_URL

ENV_VARS = (
    "TELEGRAM_BOT_TOKEN", "ADMIN_ID", "DATA_FILE", "RELAY_HOST", "RELAY_PORT",
    "UPSTREAM_URL", "STOCK_URL", "ASSET_BASE_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_missing_token_raises() -> None:
    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        Config.from_env()


def test_defaults_without_token_for_relay_only() -> None:
    config = Config.from_env(require_token=False)

    assert config.token is None
    assert config.data_file == "bot_data.json"
    assert config.upstream_url == UPSTREAM_URL
    assert config.relay_url == "http://127.0.0.1:8080/api/data"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("ADMIN_ID", "42")
    monkeypatch.setenv("RELAY_HOST", "0.0.0.0")
    monkeypatch.setenv("RELAY_PORT", "9000")
    monkeypatch.setenv("ASSET_BASE_URL", "https://cdn.example.com")

    config = Config.from_env()

    assert config.token == "123:abc"
    assert config.admin_id == "42"
    assert config.relay_url == "http://0.0.0.0:9000/api/data"
    assert config.asset_base_url == "https://cdn.example.com"


def test_stock_url_overrides_relay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STOCK_URL", "https://relay.example.com/api/data")
    assert Config.from_env(require_token=False).relay_url == "https://relay.example.com/api/data"


def test_bad_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELAY_PORT", "eighty")
    with pytest.raises(ValueError, match="RELAY_PORT"):
        Config.from_env(require_token=False)
