from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Framework = Literal["javascript", "react", "angular"]
DocType = Literal["guide", "api"]


class DocRequest(BaseModel):
    """Validated arguments of a get_doc call."""

    topic: str
    framework: Framework = "javascript"
    type: DocType = "guide"

    @property
    def is_api(self) -> bool:
        return self.type == "api"


class SearchResults(BaseModel):
    """Matches from search_docs, each list in index order."""

    api_endpoints: list[str] = []
    guide_topics: list[str] = []
    categories: list[str] = []

    @property
    def total(self) -> int:
        return len(self.api_endpoints) + len(self.guide_topics) + len(self.categories)
