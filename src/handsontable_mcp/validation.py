"""Input validation for tool arguments.

Every validator either returns a clean value or raises ``DocsError`` with
code ``INVALID_INPUT``. Topics are sanitised destructively (disallowed
characters are dropped); the traversal checks then run on the sanitised
string so stripped characters cannot smuggle a ``..`` past them.
"""

from __future__ import annotations

import re

from handsontable_mcp.errors import invalid_input
from handsontable_mcp.models.tools import DocRequest

VALID_FRAMEWORKS: tuple[str, ...] = ("javascript", "react", "angular")
VALID_TYPES: tuple[str, ...] = ("guide", "api")

DEFAULT_FRAMEWORK = "javascript"
DEFAULT_TYPE = "guide"

MAX_TOPIC_LENGTH = 200
MAX_KEYWORD_LENGTH = 100

_TOPIC_DISALLOWED_RE = re.compile(r"[^a-z0-9\-_/]", re.IGNORECASE)


def validate_topic(raw: object) -> str:
    """Return the sanitised topic or raise INVALID_INPUT."""
    if not raw or not isinstance(raw, str):
        raise invalid_input(
            "Topic must be a non-empty string",
            suggestion='Pass a documentation topic such as "column-sorting".',
        )

    trimmed = raw.strip()
    if len(trimmed) > MAX_TOPIC_LENGTH:
        raise invalid_input(f"Topic is too long (max {MAX_TOPIC_LENGTH} characters)")

    sanitized = _TOPIC_DISALLOWED_RE.sub("", trimmed)
    if not sanitized:
        raise invalid_input(
            "Topic contains no valid characters",
            suggestion="Topics may contain letters, digits, '-', '_' and '/'.",
        )

    # "a/../b" sanitises to "a//b": an emptied path segment is rejected like ".."
    if ".." in sanitized or "//" in sanitized or sanitized.startswith("/"):
        raise invalid_input("Invalid topic format")

    return sanitized


def validate_framework(raw: object) -> str:
    if not raw:
        return DEFAULT_FRAMEWORK
    if raw not in VALID_FRAMEWORKS:
        raise invalid_input(f"Invalid framework. Must be one of: {', '.join(VALID_FRAMEWORKS)}")
    return raw  # type: ignore[return-value]


def validate_type(raw: object) -> str:
    if not raw:
        return DEFAULT_TYPE
    if raw not in VALID_TYPES:
        raise invalid_input(f"Invalid type. Must be one of: {', '.join(VALID_TYPES)}")
    return raw  # type: ignore[return-value]


def validate_keyword(raw: object) -> str:
    """Keywords are length-checked only; no characters are stripped."""
    if not raw or not isinstance(raw, str):
        raise invalid_input(
            "Keyword must be a non-empty string",
            suggestion='Pass a search keyword such as "filter" or "column".',
        )
    if len(raw) > MAX_KEYWORD_LENGTH:
        raise invalid_input(f"Keyword is too long (max {MAX_KEYWORD_LENGTH} characters)")
    return raw


def validate_doc_request(topic: object, framework: object, doc_type: object) -> DocRequest:
    """Validate all get_doc arguments and bundle them into a DocRequest."""
    return DocRequest(
        topic=validate_topic(topic),
        framework=validate_framework(framework),
        type=validate_type(doc_type),
    )
