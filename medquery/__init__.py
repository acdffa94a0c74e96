"""Free-text search query tooling for a medical job portal."""

from .parsing import ParsedQuery, format_parsed_query, parse_job_query, parse_query_to_json

__version__ = "1.0.0"

__all__ = [
    "ParsedQuery",
    "parse_job_query",
    "format_parsed_query",
    "parse_query_to_json",
]
