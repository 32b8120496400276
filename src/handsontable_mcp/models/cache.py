from __future__ import annotations

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Converted markdown for a single documentation URL."""

    url: str
    content: str  # Converted page markdown
    stored_at: float  # Monotonic clock reading at insertion (seconds)
