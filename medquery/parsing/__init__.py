"""Free-text job query parsing.

This module provides:
- ParsedQuery: structured filters extracted from a search string
- parse_job_query: the parser itself
- format_parsed_query / parse_query_to_json: canonical JSON output
"""

from .formatter import format_parsed_query, parse_query_to_json
from .models import ParsedQuery
from .parser import parse_job_query

__all__ = [
    "ParsedQuery",
    "parse_job_query",
    "format_parsed_query",
    "parse_query_to_json",
]
