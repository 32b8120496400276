"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the FastMCP lifespan context manager
- Register tools
- Start the correct transport (stdio or HTTP)
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Annotated

import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import BeforeValidator, Field

import handsontable_mcp.tools.get_doc as t_get_doc
import handsontable_mcp.tools.list_categories as t_list_categories
import handsontable_mcp.tools.search_docs as t_search_docs
from handsontable_mcp import __version__
from handsontable_mcp.cache import DocumentCache
from handsontable_mcp.config import Settings
from handsontable_mcp.converter import HtmlDocumentConverter
from handsontable_mcp.errors import DocsError
from handsontable_mcp.fetcher import DocumentPipeline, build_http_client
from handsontable_mcp.index import load_doc_index
from handsontable_mcp.rate_limiter import RateLimiter
from handsontable_mcp.state import AppState
from handsontable_mcp.transport import run_http_server

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable

    import httpx

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr — stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


def build_pipeline(settings: Settings, http_client: httpx.AsyncClient) -> DocumentPipeline:
    """Wire cache, rate limiter and converter into a fresh pipeline."""
    return DocumentPipeline(
        http_client,
        cache=DocumentCache(
            max_size=settings.cache.max_size,
            ttl_seconds=settings.cache.ttl_seconds,
        ),
        rate_limiter=RateLimiter(
            settings.fetcher.rate_limit_delay_ms / 1000,
            strict=settings.fetcher.strict_rate_limit,
        ),
        converter=HtmlDocumentConverter(),
        base_url=settings.docs.base_url,
        max_redirects=settings.fetcher.max_redirects,
    )


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    log.info(
        "server_starting",
        version=__version__,
        transport=settings.server.transport,
    )

    index = load_doc_index(settings.docs.index_path)
    http_client = build_http_client(settings.fetcher)

    state = AppState(
        settings=settings,
        index=index,
        pipeline=build_pipeline(settings, http_client),
        http_client=http_client,
    )

    log.info(
        "server_started",
        version=__version__,
        transport=settings.server.transport,
        base_url=settings.docs.base_url,
        cache_max_size=settings.cache.max_size,
        cache_ttl_seconds=settings.cache.ttl_seconds,
    )

    try:
        yield state
    finally:
        await http_client.aclose()
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("handsontable-docs", lifespan=lifespan)
# FastMCP doesn't expose a version kwarg — set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _serialise_tool_error(message: str) -> CallToolResult:
    """Wrap an error message in the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


async def _run_tool(tool: str, call: Awaitable[object]) -> object:
    """Await a handler coroutine, converting every failure into an error result."""
    try:
        return await call
    except DocsError as exc:
        log.warning(
            "tool_error",
            tool=tool,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
            status_code=exc.status_code,
        )
        return _serialise_tool_error(exc.message)
    except Exception as exc:
        log.error("tool_unexpected_error", tool=tool, exc_info=True)
        return _serialise_tool_error(str(exc) or type(exc).__name__)


# Arguments are checked by handsontable_mcp.validation, not by FastMCP's
# argument model: null or non-string values are coerced to text here so the
# validators report them as ``Error: ...`` results.


def _text_or_blank(value: object) -> object:
    return value if isinstance(value, str) else ""


def _choice_text(value: object) -> object:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


TextArgument = Annotated[str, BeforeValidator(_text_or_blank)]
ChoiceArgument = Annotated[str, BeforeValidator(_choice_text)]


@mcp.tool()
async def get_doc(
    ctx: Context,
    topic: Annotated[
        TextArgument,
        Field(
            description=(
                'The documentation topic (e.g., "column-sorting", "filters", "installation"). '
                "Use search_docs to find available topics."
            )
        ),
    ] = "",
    framework: Annotated[
        ChoiceArgument,
        Field(description="The framework version of the docs: javascript, react or angular."),
    ] = "javascript",
    type: Annotated[
        ChoiceArgument,
        Field(description="Whether this is a guide or an api reference page."),
    ] = "guide",
) -> object:
    """Fetch Handsontable documentation for a specific topic and framework.

    Returns the documentation as markdown.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("get_doc", t_get_doc.handle(topic, framework, type, state))


@mcp.tool()
async def search_docs(
    ctx: Context,
    keyword: Annotated[
        TextArgument,
        Field(description='Keyword to search for (e.g., "column", "filter", "sort").'),
    ] = "",
) -> object:
    """Search for Handsontable documentation topics by keyword.

    Returns matching API endpoints, guide topics, and categories.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("search_docs", t_search_docs.handle(keyword, state))


def _require_arguments(tool_name: str, *names: str) -> None:
    """Advertise ``names`` as required in a tool's input schema.

    The functions above default them to "" so an omitted argument reaches
    handsontable_mcp.validation instead of failing FastMCP's argument model.
    """
    tool = mcp._tool_manager.get_tool(tool_name)  # pyright: ignore[reportPrivateUsage]
    if tool is None:
        raise RuntimeError(f"Tool {tool_name!r} is not registered")
    tool.parameters["required"] = list(names)
    for name in names:
        tool.parameters["properties"][name].pop("default", None)


_require_arguments("get_doc", "topic")
_require_arguments("search_docs", "keyword")


@mcp.tool()
async def list_categories(ctx: Context) -> object:
    """List all available documentation categories with their topics.

    Useful for browsing the documentation structure.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("list_categories", t_list_categories.handle(state))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    settings = Settings()

    if settings.server.transport == "http":
        _setup_logging(settings)
        run_http_server(mcp, settings)
        return

    mcp.run()


if __name__ == "__main__":
    main()
