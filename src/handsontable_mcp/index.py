"""Static documentation index: loading and validation.

The index (``docs-structure.json``) lists the known API endpoints, guide
topics and sidebar categories of the documentation site. It is produced
outside this server, bundled with the package, and read once at startup.
"""

from __future__ import annotations

import json
from importlib.resources import files
from pathlib import Path

import structlog

from handsontable_mcp.models.index import DocIndex

log = structlog.get_logger()

BUNDLED_INDEX_NAME = "docs-structure.json"


def _read_bundled_index() -> str:
    return (files("handsontable_mcp") / "data" / BUNDLED_INDEX_NAME).read_text(encoding="utf-8")


def load_doc_index(path: Path | str | None = None) -> DocIndex:
    """Load the documentation index from ``path`` or the bundled copy.

    Raises on a missing or malformed file; without an index the search and
    listing tools have nothing to serve, so this is a startup failure.
    """
    if path is None:
        source = "bundled"
        raw = _read_bundled_index()
    else:
        source = str(Path(path).expanduser())
        raw = Path(source).read_text(encoding="utf-8")

    index = DocIndex.model_validate(json.loads(raw))
    log.info(
        "doc_index_loaded",
        source=source,
        api_endpoints=len(index.api_endpoints),
        guide_topics=len(index.guide_topics),
        categories=len(index.categories),
        total_urls=index.total_urls,
    )
    return index
