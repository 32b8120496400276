"""Unit tests for configuration defaults and environment overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from handsontable_mcp.config import CacheSettings, FetcherSettings, Settings
from handsontable_mcp.urls import BASE_URL


class TestDefaults:
    def test_cache_defaults(self) -> None:
        settings = CacheSettings()
        assert settings.ttl_seconds == 3600
        assert settings.max_size == 100

    def test_fetcher_defaults(self) -> None:
        settings = FetcherSettings()
        assert settings.rate_limit_delay_ms == 100
        assert settings.strict_rate_limit is False
        assert settings.timeout_seconds == 30.0

    def test_docs_defaults(self) -> None:
        settings = Settings()
        assert settings.docs.base_url == BASE_URL
        assert settings.docs.index_path is None
        assert settings.server.transport == "stdio"


class TestEnvironmentOverrides:
    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HANDSONTABLE_MCP__CACHE__MAX_SIZE", "5")
        monkeypatch.setenv("HANDSONTABLE_MCP__FETCHER__RATE_LIMIT_DELAY_MS", "250")
        settings = Settings()
        assert settings.cache.max_size == 5
        assert settings.fetcher.rate_limit_delay_ms == 250

    def test_invalid_transport_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HANDSONTABLE_MCP__SERVER__TRANSPORT", "carrier-pigeon")
        with pytest.raises(ValidationError):
            Settings()

    def test_zero_cache_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(max_size=0)
