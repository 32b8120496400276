from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DocCategory(BaseModel):
    """One sidebar category of the documentation site."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    pages: list[str] = []
    page_count: int = Field(default=0, alias="pageCount")


class DocIndex(BaseModel):
    """Static index of known documentation paths (docs-structure.json).

    Loaded once at startup and never mutated; search and listing tools read
    it directly without touching the cache or the network.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_endpoints: list[str] = Field(default=[], alias="apiEndpoints")
    guide_topics: list[str] = Field(default=[], alias="guideTopics")
    categories: list[DocCategory] = []
    frameworks: list[str] = []
    total_urls: int = Field(default=0, alias="totalUrls")
