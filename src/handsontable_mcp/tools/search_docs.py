"""Tool handler for search_docs.

Receives AppState, delegates to the search module, and renders a markdown
report. No MCP or FastMCP imports — server.py handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from handsontable_mcp.search import search_topics
from handsontable_mcp.validation import validate_keyword

if TYPE_CHECKING:
    from handsontable_mcp.models.tools import SearchResults
    from handsontable_mcp.state import AppState

NO_MATCHES_NOTICE = (
    "No matches found. Try different keywords or use list_categories to browse all topics.\n"
)


async def handle(keyword: str, state: AppState) -> str:
    """Handle a search_docs tool call."""
    log = structlog.get_logger().bind(tool="search_docs", keyword=keyword)
    log.info("handler_called")

    validated = validate_keyword(keyword)
    results = search_topics(validated, state.index)
    log.info("search_complete", match_count=results.total)

    return render_results(validated, results)


def render_results(keyword: str, results: SearchResults) -> str:
    parts = [f'# Search Results for "{keyword}"\n\nFound {results.total} matches:\n\n']

    sections = (
        ("API Endpoints", results.api_endpoints),
        ("Guide Topics", results.guide_topics),
        ("Categories", results.categories),
    )
    for heading, items in sections:
        if not items:
            continue
        parts.append(f"## {heading} ({len(items)})\n")
        parts.extend(f"- {item}\n" for item in items)
        parts.append("\n")

    if results.total == 0:
        parts.append(NO_MATCHES_NOTICE)

    return "".join(parts)
