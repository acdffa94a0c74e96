"""Search-box helpers that sit around the query parser.

This module provides:
- normalize_search_query / extract_search_keywords: query clean-up
- build_search_url / validate_search_query: submission helpers
- track_search: structured search metrics
- SearchHistory: recent searches, optionally persisted to a JSON file
"""

from .history import SearchHistory
from .models import SearchHistoryItem, SearchMetrics, SearchValidation
from .service import (
    build_search_url,
    extract_search_keywords,
    normalize_search_query,
    track_search,
    validate_search_query,
)

__all__ = [
    "SearchHistory",
    "SearchHistoryItem",
    "SearchMetrics",
    "SearchValidation",
    "build_search_url",
    "extract_search_keywords",
    "normalize_search_query",
    "track_search",
    "validate_search_query",
]
