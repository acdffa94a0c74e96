"""Search-box helpers: normalization, keyword extraction, URLs and validation.

Unlike parse_job_query(), these helpers bound the query length: normalized
queries are cut to max_length characters (200 by default).
"""

import re
import time
from typing import Dict, List, Optional
from urllib.parse import quote_plus, urlencode

from medquery.logging import get_logger

from .models import SearchMetrics, SearchValidation

logger = get_logger(__name__, component="search")

DEFAULT_MAX_QUERY_LENGTH = 200
MIN_KEYWORD_LENGTH = 3
SEARCH_PATH = "/jobs"

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with",
})

# Anything that is not a word character, whitespace, hyphen, ampersand or slash
_DISALLOWED_CHARS = re.compile(r"[^\w\s\-&/]", re.ASCII)
_WHITESPACE_RUN = re.compile(r"\s+")


def _form_quote(value: str, safe: str = "", encoding=None, errors=None) -> str:
    """Form-encode a value: "*" stays literal and "~" is percent-encoded."""
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def now_millis() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def normalize_search_query(
    query: Optional[str], max_length: Optional[int] = DEFAULT_MAX_QUERY_LENGTH
) -> str:
    """Clean a search-box query before it is sent to the job search API.

    Steps:
    - Trim and collapse whitespace runs to a single space
    - Remove characters other than ASCII letters/digits/underscore,
      whitespace, "-", "&" and "/"
    - Truncate to max_length characters (no truncation when max_length is None)

    Example:
        >>> normalize_search_query("  Staff   Nurse (ICU)!  ")
        'Staff Nurse ICU'
    """
    if not query:
        return ""

    normalized = _WHITESPACE_RUN.sub(" ", query.strip())
    normalized = _DISALLOWED_CHARS.sub("", normalized)

    if max_length is not None and len(normalized) > max_length:
        normalized = normalized[:max_length]

    return normalized


def extract_search_keywords(query: Optional[str], max_length: int = DEFAULT_MAX_QUERY_LENGTH) -> List[str]:
    """Split a query into lower-case keywords, dropping stop words and short words.

    Example:
        >>> extract_search_keywords("Staff nurse for ICU in Pune")
        ['staff', 'nurse', 'icu', 'pune']
    """
    normalized = normalize_search_query(query, max_length)
    if not normalized:
        return []

    words = _WHITESPACE_RUN.split(normalized.lower())
    return [word for word in words if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS]


def build_search_url(
    search_query: Optional[str],
    location: Optional[str],
    additional_params: Optional[Dict[str, str]] = None,
    max_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> str:
    """Build the job listing URL for a search.

    Empty values are left out; a later additional parameter with the same
    name replaces an earlier one. Values are form-encoded: spaces become "+",
    "*" is kept and "~" is percent-encoded.

    Example:
        >>> build_search_url("staff nurse", "Pune", {"type": "full time"})
        '/jobs?search=staff+nurse&location=Pune&type=full+time'
    """
    params: Dict[str, str] = {}

    normalized_query = normalize_search_query(search_query, max_length)
    if normalized_query:
        params["search"] = normalized_query

    if location and location.strip():
        params["location"] = location.strip()

    for key, value in (additional_params or {}).items():
        if value:
            params[key] = value

    query_string = urlencode(params, quote_via=_form_quote)
    return f"{SEARCH_PATH}?{query_string}" if query_string else SEARCH_PATH


def validate_search_query(query: Optional[str], max_length: int = DEFAULT_MAX_QUERY_LENGTH) -> SearchValidation:
    """Check that a query is worth submitting.

    The length limit applies to the cleaned query before truncation, so an
    over-long query is reported instead of being silently cut.
    """
    normalized = normalize_search_query(query, max_length=None)

    if len(normalized) < 1:
        return SearchValidation(valid=False, error="Please enter a search query")

    if len(normalized) > max_length:
        return SearchValidation(
            valid=False,
            error=f"Search query is too long (max {max_length} characters)",
        )

    return SearchValidation(valid=True)


def track_search(
    query: Optional[str],
    location: Optional[str],
    result_count: int,
    max_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> SearchMetrics:
    """Record metrics for an executed search as a structured log event.

    Args:
        query: Raw search text
        location: Location filter used for the search
        result_count: Number of jobs the search returned
        max_length: Maximum normalized query length

    Returns:
        The SearchMetrics that were logged
    """
    metrics = SearchMetrics(
        query=normalize_search_query(query, max_length),
        location=(location or "").strip(),
        result_count=max(result_count, 0),
        timestamp=now_millis(),
    )

    logger.info(
        "Search tracked",
        extra={
            "event": "search.tracked",
            "search_query": metrics.query,
            "search_location": metrics.location,
            "result_count": metrics.result_count,
        },
    )

    return metrics
