"""Protocol interfaces for swappable components.

The pipeline and AppState reference these protocols, not the concrete
implementations. This allows:
- Tests to inject fake clocks, recording limiters and stub converters
- Future backends (e.g. a shared cache) to be swapped without changing tool code
"""

from __future__ import annotations

from typing import Protocol


class CacheProtocol(Protocol):
    """Interface for the converted-document cache."""

    def get(self, url: str) -> str | None: ...

    def put(self, url: str, content: str) -> None: ...


class RateLimiterProtocol(Protocol):
    """Interface for the outbound request gate."""

    async def wait(self) -> None: ...


class ConverterProtocol(Protocol):
    """Interface for HTML page → markdown conversion."""

    def convert(self, html: str) -> str: ...


class PipelineProtocol(Protocol):
    """Interface for the fetch → sanitise → convert → cache pipeline."""

    async def fetch_and_convert(self, url: str) -> str: ...
