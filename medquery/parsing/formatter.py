"""Canonical JSON serialization of parsed job queries."""

import json

from .models import ParsedQuery
from .parser import parse_job_query

JSON_INDENT = 2


def format_parsed_query(parsed: ParsedQuery) -> str:
    """Serialize a ParsedQuery as pretty-printed JSON.

    Keys follow the model's field order, missing single values become null and
    non-ASCII text (the rupee sign in salaries) is written as-is.
    """
    return json.dumps(parsed.model_dump(), indent=JSON_INDENT, ensure_ascii=False)


def parse_query_to_json(query: str) -> str:
    """Parse a free-text query and return its JSON form."""
    return format_parsed_query(parse_job_query(query))
