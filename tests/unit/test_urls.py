"""Unit tests for handsontable_mcp.urls."""

from __future__ import annotations

import pytest

from handsontable_mcp.urls import BASE_URL, build_doc_url, is_url_allowed


class TestBuildDocUrl:
    def test_guide_topic(self) -> None:
        assert build_doc_url("react", "column-sorting", False) == (
            "https://handsontable.com/docs/react-data-grid/column-sorting/"
        )

    def test_api_reference(self) -> None:
        assert build_doc_url("javascript", "core", True) == (
            "https://handsontable.com/docs/javascript-data-grid/api/core/"
        )

    def test_is_api_defaults_false(self) -> None:
        assert build_doc_url("angular", "demo") == (
            "https://handsontable.com/docs/angular-data-grid/demo/"
        )

    def test_guides_prefix_stripped_without_trailing_slash(self) -> None:
        assert build_doc_url("javascript", "guides/getting-started/installation") == (
            "https://handsontable.com/docs/javascript-data-grid/getting-started/installation"
        )

    def test_api_prefix_kept(self) -> None:
        assert build_doc_url("react", "api/filters") == (
            "https://handsontable.com/docs/react-data-grid/api/filters"
        )

    def test_is_api_wins_over_prefix(self) -> None:
        assert build_doc_url("javascript", "guides/x", True) == (
            "https://handsontable.com/docs/javascript-data-grid/api/guides/x/"
        )

    def test_only_leading_guides_prefix_removed(self) -> None:
        assert build_doc_url("javascript", "guides/guides/x") == (
            "https://handsontable.com/docs/javascript-data-grid/guides/x"
        )

    def test_custom_base_url(self) -> None:
        assert build_doc_url("react", "demo", base_url="https://mirror.test/docs") == (
            "https://mirror.test/docs/react-data-grid/demo/"
        )

    @pytest.mark.parametrize("framework", ["javascript", "react", "angular"])
    def test_always_under_base_url(self, framework: str) -> None:
        assert build_doc_url(framework, "filters").startswith(BASE_URL)


class TestIsUrlAllowed:
    def test_docs_url_allowed(self) -> None:
        assert is_url_allowed("https://handsontable.com/docs/react-data-grid/demo/")

    def test_other_host_rejected(self) -> None:
        assert not is_url_allowed("https://evil.example.com/docs/")

    def test_same_host_outside_docs_rejected(self) -> None:
        assert not is_url_allowed("https://handsontable.com/pricing")

    def test_custom_base(self) -> None:
        assert is_url_allowed("https://mirror.test/docs/x", "https://mirror.test/docs")
