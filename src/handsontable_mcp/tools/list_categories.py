"""Tool handler for list_categories.

Renders the static documentation index as a browsable overview. Reads the
index only. No cache and no network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from handsontable_mcp.models.index import DocIndex
    from handsontable_mcp.state import AppState

SAMPLE_PAGES_PER_CATEGORY = 5


async def handle(state: AppState) -> str:
    """Handle a list_categories tool call."""
    log = structlog.get_logger().bind(tool="list_categories")
    log.info("handler_called")
    return render_categories(state.index)


def render_categories(index: DocIndex) -> str:
    parts = [
        "# Handsontable Documentation Categories\n\n",
        f"Total: {len(index.categories)} categories, {index.total_urls} pages\n\n",
    ]

    for category in index.categories:
        parts.append(f"## {category.title} ({category.page_count} pages)\n")
        # Pages are stored as paths; show the last segment, which is the topic name
        for page in category.pages[:SAMPLE_PAGES_PER_CATEGORY]:
            parts.append(f"- {page.split('/')[-1]}\n")
        hidden = len(category.pages) - SAMPLE_PAGES_PER_CATEGORY
        if hidden > 0:
            parts.append(f"- ... and {hidden} more\n")
        parts.append("\n")

    parts.append("\n## Frameworks Available\n")
    parts.extend(f"- {framework}\n" for framework in index.frameworks)

    return "".join(parts)
