"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (HANDSONTABLE_MCP__SERVER__TRANSPORT=http)
  2. handsontable-mcp.yaml  (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from handsontable_mcp.urls import BASE_URL

_APP_NAME = "handsontable-mcp"
_CONFIG_FILENAME = "handsontable-mcp.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first handsontable-mcp.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(platformdirs.user_config_dir(_APP_NAME)) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ServerSettings(BaseModel):
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8080


class DocsSettings(BaseModel):
    base_url: str = BASE_URL
    # None means the docs-structure.json bundled with the package
    index_path: str | None = None


class CacheSettings(BaseModel):
    ttl_seconds: float = Field(default=60 * 60, gt=0)
    max_size: int = Field(default=100, ge=1)


class FetcherSettings(BaseModel):
    rate_limit_delay_ms: int = Field(default=100, ge=0)
    strict_rate_limit: bool = False
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_redirects: int = Field(default=3, ge=0)
    user_agent: str = "handsontable-mcp/1.0"


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: HANDSONTABLE_MCP__SERVER__PORT=9090
        env_prefix="HANDSONTABLE_MCP__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    server: ServerSettings = ServerSettings()
    docs: DocsSettings = DocsSettings()
    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
