"""Data models for search-box helpers."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchValidation(BaseModel):
    """Outcome of validating a search query before submission."""

    valid: bool
    error: Optional[str] = None


class SearchHistoryItem(BaseModel):
    """A remembered search.

    Attributes:
        query: Normalized search text
        location: Trimmed location filter (may be empty)
        timestamp: When the search was saved, in epoch milliseconds
    """

    query: str
    location: str = ""
    timestamp: int = Field(..., ge=0)


class SearchMetrics(BaseModel):
    """Metrics recorded for a single executed search."""

    query: str
    location: str = ""
    result_count: int = Field(..., ge=0)
    timestamp: int = Field(..., ge=0)
