"""Shared test fixtures for the handsontable_mcp test suite."""

from __future__ import annotations

import pytest

from handsontable_mcp.models.index import DocCategory, DocIndex


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSleep:
    """Records requested delays and advances the paired clock instead of sleeping."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.clock.advance(seconds)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def fake_sleep(clock: FakeClock) -> FakeSleep:
    return FakeSleep(clock)


@pytest.fixture()
def doc_index() -> DocIndex:
    """Minimal documentation index for search and listing tests."""
    return DocIndex(
        api_endpoints=["core", "filters", "column-sorting", "hooks", "multi-column-sorting"],
        guide_topics=["installation", "column-filter", "filtering", "row-header", "demo"],
        categories=[
            DocCategory(
                title="Getting started",
                pages=[
                    "guides/getting-started/installation",
                    "guides/getting-started/demo",
                ],
                page_count=2,
            ),
            DocCategory(
                title="Columns",
                pages=[
                    "guides/columns/column-header",
                    "guides/columns/column-groups",
                    "guides/columns/column-hiding",
                    "guides/columns/column-moving",
                    "guides/columns/column-freezing",
                    "guides/columns/column-width",
                    "guides/columns/column-filter",
                ],
                page_count=7,
            ),
            DocCategory(title="Filtering data", pages=[], page_count=0),
        ],
        frameworks=["javascript", "react", "angular"],
        total_urls=14,
    )
