"""Application state container.

AppState is created once at server startup (inside the FastMCP lifespan context
manager) and injected into every tool handler via the MCP Context object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from handsontable_mcp.config import Settings
    from handsontable_mcp.models.index import DocIndex
    from handsontable_mcp.protocols import PipelineProtocol


@dataclass
class AppState:
    """Holds all shared runtime state. Passed to every tool handler."""

    settings: Settings
    index: DocIndex
    pipeline: PipelineProtocol | None = None
    http_client: httpx.AsyncClient | None = None
