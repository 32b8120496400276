"""Documentation URL construction.

Pure functions without I/O or settings. The base URL is passed in by callers
that have one configured and defaults to the public Handsontable docs site.
"""

from __future__ import annotations

BASE_URL = "https://handsontable.com/docs"

_GUIDES_PREFIX = "guides/"
_API_PREFIX = "api/"


def build_doc_url(
    framework: str,
    path: str,
    is_api: bool = False,
    *,
    base_url: str = BASE_URL,
) -> str:
    """Map ``(framework, path, is_api)`` to the canonical documentation URL.

    Three shapes:
      1. API reference:          ``<base>/<framework>-data-grid/api/<path>/``
      2. Pre-structured path:    ``guides/x`` → ``<base>/<framework>-data-grid/x``
                                 ``api/x``    → ``<base>/<framework>-data-grid/api/x``
      3. Plain topic:            ``<base>/<framework>-data-grid/<path>/``

    Pre-structured paths are joined as-is, without adding a trailing slash.
    """
    framework_segment = f"{framework}-data-grid"

    if is_api:
        return f"{base_url}/{framework_segment}/api/{path}/"

    if path.startswith(_GUIDES_PREFIX) or path.startswith(_API_PREFIX):
        return f"{base_url}/{framework_segment}/{path.removeprefix(_GUIDES_PREFIX)}"

    return f"{base_url}/{framework_segment}/{path}/"


def is_url_allowed(url: str, base_url: str = BASE_URL) -> bool:
    """Only URLs under the documentation base URL may be fetched."""
    return url.startswith(base_url)
