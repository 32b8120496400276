"""Integration test fixtures.

Provides a fully wired AppState with a real pipeline (cache, rate limiter,
converter) around a plain httpx client that respx intercepts. The clock and
sleep are fakes from tests/conftest.py, so TTL and rate limiting are
deterministic.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from handsontable_mcp.cache import DocumentCache
from handsontable_mcp.config import Settings
from handsontable_mcp.converter import HtmlDocumentConverter
from handsontable_mcp.fetcher import DocumentPipeline
from handsontable_mcp.rate_limiter import RateLimiter
from handsontable_mcp.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

    from handsontable_mcp.models.index import DocIndex
    from tests.conftest import FakeClock, FakeSleep


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Baseline env dict for subprocess-based MCP integration tests.

    Forces stdio transport and JSON logging, and points HOME at an empty tmp
    directory so no user-level handsontable-mcp.yaml is picked up.
    """
    env = os.environ.copy()
    env["HANDSONTABLE_MCP__SERVER__TRANSPORT"] = "stdio"
    env["HANDSONTABLE_MCP__LOGGING__FORMAT"] = "json"
    # Unroutable base URL: any accidental fetch fails fast instead of hitting the network
    env["HANDSONTABLE_MCP__DOCS__BASE_URL"] = "http://127.0.0.1:1/docs"
    env["HOME"] = str(tmp_path)
    return env


@pytest.fixture()
def rate_limiter(clock: FakeClock, fake_sleep: FakeSleep) -> RateLimiter:
    return RateLimiter(0.1, clock=clock, sleep=fake_sleep)


@pytest.fixture()
def doc_cache(clock: FakeClock) -> DocumentCache:
    return DocumentCache(max_size=100, ttl_seconds=3600, clock=clock)


@pytest.fixture()
async def app_state(
    doc_index: DocIndex,
    doc_cache: DocumentCache,
    rate_limiter: RateLimiter,
) -> AsyncGenerator[AppState, None]:
    """Full AppState wired for integration tests."""
    settings = Settings()
    async with httpx.AsyncClient() as client:
        pipeline = DocumentPipeline(
            client,
            cache=doc_cache,
            rate_limiter=rate_limiter,
            converter=HtmlDocumentConverter(),
            base_url=settings.docs.base_url,
        )
        yield AppState(
            settings=settings,
            index=doc_index,
            pipeline=pipeline,
            http_client=client,
        )
