"""Keyword search over the static documentation index.

Pure business logic: receives a DocIndex, returns SearchResults.
No knowledge of AppState, MCP, or I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from handsontable_mcp.models.tools import SearchResults

if TYPE_CHECKING:
    from handsontable_mcp.models.index import DocIndex


def normalise_keyword(raw: str) -> str:
    return raw.lower().strip()


def search_topics(keyword: str, index: DocIndex) -> SearchResults:
    """Case-insensitive substring match across the three index collections.

    Categories match on title and are returned by title. Each result list
    keeps the index's original ordering; empty lists mean no matches.
    """
    needle = normalise_keyword(keyword)

    return SearchResults(
        api_endpoints=[e for e in index.api_endpoints if needle in e.lower()],
        guide_topics=[t for t in index.guide_topics if needle in t.lower()],
        categories=[c.title for c in index.categories if needle in c.title.lower()],
    )
