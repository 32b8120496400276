"""HTML page → markdown conversion.

Three steps over a BeautifulSoup tree:
  1. pick the content root (first matching selector, else ``<body>``)
  2. decompose structural chrome (navigation, scripts, embeds) below it
  3. hand the root's inner HTML to markdownify (ATX headings, fenced code)
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from markdownify import ATX
from markdownify import markdownify as md_convert

# Tried in order; the first selector that matches wins.
CONTENT_ROOT_SELECTORS: tuple[str, ...] = (
    "main",
    '[role="main"]',
    ".content",
    "article",
)

NON_CONTENT_SELECTORS: tuple[str, ...] = (
    "nav",
    "header",
    "footer",
    ".sidebar",
    ".navigation",
    ".breadcrumb",
    "script",
    "style",
    "iframe",
)


def select_content_root(soup: BeautifulSoup) -> Tag:
    """Return the subtree holding the page's primary content."""
    for selector in CONTENT_ROOT_SELECTORS:
        node = soup.select_one(selector)
        if node is not None:
            return node
    # Fragments parsed without an explicit <body> fall back to the whole tree
    return soup.body or soup


def strip_non_content(root: Tag) -> int:
    """Decompose every descendant matching NON_CONTENT_SELECTORS.

    Returns the number of removed nodes.
    """
    removed = 0
    for selector in NON_CONTENT_SELECTORS:
        for node in root.select(selector):
            # An ancestor matched by an earlier selector may already be gone
            if node.decomposed:
                continue
            node.decompose()
            removed += 1
    return removed


def html_to_markdown(html: str) -> str:
    """Convert an HTML fragment to markdown with ATX headings and fenced code."""
    return md_convert(html, heading_style=ATX).strip()


class HtmlDocumentConverter:
    """Implements ConverterProtocol with BeautifulSoup and markdownify."""

    def __init__(self, parser: str = "html.parser") -> None:
        self._parser = parser

    def convert(self, html: str) -> str:
        soup = BeautifulSoup(html, self._parser)
        root = select_content_root(soup)
        strip_non_content(root)
        return html_to_markdown(root.decode_contents())
