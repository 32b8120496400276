from __future__ import annotations

from handsontable_mcp.models.cache import CacheEntry
from handsontable_mcp.models.index import DocCategory, DocIndex
from handsontable_mcp.models.tools import DocRequest, DocType, Framework, SearchResults

__all__ = [
    # cache
    "CacheEntry",
    # index
    "DocCategory",
    "DocIndex",
    # tools
    "DocRequest",
    "DocType",
    "Framework",
    "SearchResults",
]
