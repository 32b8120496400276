"""Fetch → sanitise → convert → cache pipeline for documentation pages.

All network I/O for documentation goes through a single DocumentPipeline
shared across tool calls. The pipeline receives its httpx.AsyncClient, cache,
rate limiter and converter via constructor injection; the lifespan owns
their lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urljoin

import httpx
import structlog

from handsontable_mcp.errors import DocsError, ErrorCode
from handsontable_mcp.urls import BASE_URL, is_url_allowed

if TYPE_CHECKING:
    from handsontable_mcp.config import FetcherSettings
    from handsontable_mcp.protocols import (
        CacheProtocol,
        ConverterProtocol,
        RateLimiterProtocol,
    )

log = structlog.get_logger()


def build_http_client(settings: FetcherSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    timeout = settings.timeout_seconds if settings is not None else 30.0
    user_agent = settings.user_agent if settings is not None else "handsontable-mcp/1.0"
    return httpx.AsyncClient(
        # Redirects are followed manually so every hop is checked against the base URL
        follow_redirects=False,
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": user_agent},
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        ),
    )


class DocumentPipeline:
    """Cached, rate-limited documentation fetcher implementing PipelineProtocol."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: CacheProtocol,
        rate_limiter: RateLimiterProtocol,
        converter: ConverterProtocol,
        *,
        base_url: str = BASE_URL,
        max_redirects: int = 3,
    ) -> None:
        self._client = client
        self.cache = cache
        self.rate_limiter = rate_limiter
        self.converter = converter
        self.base_url = base_url
        self.max_redirects = max_redirects

    async def fetch_and_convert(self, url: str) -> str:
        """Return the markdown for ``url``, from cache when fresh.

        Raises DocsError: URL_NOT_ALLOWED for URLs outside the base URL,
        FETCH_FAILED for anything that goes wrong once the request starts.
        Failed fetches are never cached.
        """
        if not is_url_allowed(url, self.base_url):
            raise DocsError(
                code=ErrorCode.URL_NOT_ALLOWED,
                message=f"Invalid URL: Must be under {self.base_url}",
                suggestion="Only Handsontable documentation pages can be fetched.",
                recoverable=False,
            )

        cached = self.cache.get(url)
        if cached is not None:
            log.debug("cache_hit", url=url)
            return cached

        await self.rate_limiter.wait()

        try:
            log.info("cache_miss_fetching", url=url)
            html = await self._get_html(url)
            markdown = self.converter.convert(html)
        except Exception as exc:
            message = exc.message if isinstance(exc, DocsError) else str(exc) or type(exc).__name__
            status_code = exc.status_code if isinstance(exc, DocsError) else None
            log.error("fetch_failed", url=url, error=message, status_code=status_code)
            raise DocsError(
                code=ErrorCode.FETCH_FAILED,
                message=f"Failed to fetch documentation: {message}",
                suggestion=_suggestion_for(status_code),
                recoverable=status_code is None or status_code >= 500,
                status_code=status_code,
            ) from exc

        self.cache.put(url, markdown)
        log.info("fetch_complete", url=url, content_length=len(markdown))
        return markdown

    async def _get_html(self, url: str) -> str:
        """GET ``url``, following same-site redirects, and return the body text."""
        current_url = url

        for hop in range(self.max_redirects + 1):
            response = await self._client.get(current_url)

            if response.is_redirect and "location" in response.headers:
                if hop == self.max_redirects:
                    raise DocsError(
                        code=ErrorCode.FETCH_FAILED,
                        message=f"Too many redirects fetching {url}",
                    )
                current_url = urljoin(current_url, response.headers["location"])
                if not is_url_allowed(current_url, self.base_url):
                    log.warning("redirect_blocked", url=url, location=current_url)
                    raise DocsError(
                        code=ErrorCode.URL_NOT_ALLOWED,
                        message=f"Redirect left the documentation site: {current_url}",
                    )
                continue

            if not response.is_success:
                raise DocsError(
                    code=ErrorCode.FETCH_FAILED,
                    message=f"HTTP {response.status_code}: {response.reason_phrase}",
                    status_code=response.status_code,
                )

            return response.text

        # Unreachable but satisfies the type checker
        raise DocsError(code=ErrorCode.FETCH_FAILED, message="Redirect loop")


def _suggestion_for(status_code: int | None) -> str:
    if status_code == 404:
        return "The topic may not exist for this framework. Use search_docs to find valid topics."
    if status_code is not None and status_code < 500:
        return "Check the topic, framework and type arguments."
    return "The documentation site may be temporarily unavailable. Try again later."
