"""Tool handler for get_doc.

Receives AppState, validates arguments, builds the documentation URL and
runs it through the fetch pipeline. No MCP or FastMCP imports — server.py
handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from handsontable_mcp.urls import build_doc_url
from handsontable_mcp.validation import validate_doc_request

if TYPE_CHECKING:
    from handsontable_mcp.state import AppState


async def handle(topic: str, framework: str | None, doc_type: str | None, state: AppState) -> str:
    """Handle a get_doc tool call."""
    request = validate_doc_request(topic, framework, doc_type)

    log = structlog.get_logger().bind(
        tool="get_doc",
        topic=request.topic,
        framework=request.framework,
        type=request.type,
    )
    log.info("handler_called")

    if state.pipeline is None:
        raise RuntimeError("Fetch pipeline not initialized")

    url = build_doc_url(
        request.framework,
        request.topic,
        request.is_api,
        base_url=state.settings.docs.base_url,
    )
    markdown = await state.pipeline.fetch_and_convert(url)

    return (
        f"# Handsontable Documentation: {request.topic} ({request.framework})\n\n"
        f"Source: {url}\n\n"
        f"{markdown}"
    )
