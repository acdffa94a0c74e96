"""Free-text job query parser.

Turns a search-box string such as "MBBS doctor in Mumbai 5-7 years 8 lakh"
into a ParsedQuery of structured filters. Extraction runs as a fixed sequence
of steps:

1. Qualifications (plus fixed synonyms for MBBS/MD/MS)
2. Departments
3. Location (first match wins)
4. Titles via role-synonym keys
5. Fallback title patterns (only when step 4 found nothing)
6. Experience
7. Salary
8. Job type (first match wins)
9. Company keyword (first match wins)
10. Typo corrections (adds to synonyms only)
11. Deduplication

Dictionary lookups are case-insensitive substring tests against the trimmed,
lower-cased query. Regex steps run against the query as given.
"""

import re
from decimal import Decimal
from re import Match, Pattern
from typing import Callable, Iterable, List, Optional, Tuple

from medquery.logging import get_logger

from .dictionaries import (
    COMPANY_KEYWORDS,
    DEPARTMENTS,
    JOB_TYPES,
    LOCATIONS,
    QUALIFICATION_SYNONYMS,
    QUALIFICATIONS,
    ROLE_SYNONYMS,
    TYPO_CORRECTIONS,
)
from .models import ParsedQuery

logger = get_logger(__name__, component="parser")

# \d and \w stay ASCII-only so that only Latin digits count as amounts/years
_FLAGS = re.IGNORECASE | re.ASCII

# re.ASCII would also narrow \s, so whitespace is spelled out: ASCII
# whitespace, NBSP and the other Unicode space separators, line/paragraph
# separators and the BOM
_WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"


def _compile(pattern: str, flags: int = _FLAGS) -> Pattern:
    return re.compile(pattern.replace(r"\s", _WHITESPACE), flags)


TITLE_PATTERNS: Tuple[Pattern, ...] = tuple(
    _compile(pattern)
    for pattern in (
        r"(junior|jr)\s+(\w+)",
        r"(senior|sr)\s+(\w+)",
        r"(assistant)\s+(\w+)",
        r"(associate)\s+(\w+)",
        r"(chief)\s+(\w+)",
        r"(head)\s+of\s+(\w+)",
    )
)


def _group(match: Match, index: int) -> Optional[str]:
    """Return a capture group, or None when the pattern has no such group."""
    try:
        return match.group(index)
    except IndexError:
        return None


def _experience_range(match: Match) -> Optional[str]:
    low, high = _group(match, 1), _group(match, 2)
    if low and high:
        return f"{low}-{high} years"
    return f"{low}+ years" if low else None


def _experience_open_ended(match: Match) -> Optional[str]:
    years = _group(match, 1)
    return f"{years}+ years" if years else None


def _experience_fresher(match: Match) -> Optional[str]:
    return "0 years"


def _experience_entry_level(match: Match) -> Optional[str]:
    return "0-1 years"


def _experience_unspecified(match: Match) -> Optional[str]:
    # "experienced" carries no number; matching it ends the scan without a value
    return None


# Precedence is list order, not position in the query.
# A bare "3 years" normalizes like "3+ years".
EXPERIENCE_RULES: Tuple[Tuple[Pattern, Callable[[Match], Optional[str]]], ...] = (
    (_compile(r"(\d+)\s*-\s*(\d+)\s*years?"), _experience_range),
    (_compile(r"(\d+)\s*\+\s*years?"), _experience_open_ended),
    (_compile(r"(\d+)\s*years?"), _experience_open_ended),
    (_compile(r"fresher"), _experience_fresher),
    (_compile(r"entry\s*level"), _experience_entry_level),
    (_compile(r"experienced"), _experience_unspecified),
)

SALARY_PATTERNS: Tuple[Pattern, ...] = (
    _compile(r"₹?\s*(\d+(?:\.\d+)?)\s*(lakh|lakhs|L|Lakh)"),
    _compile(r"₹?\s*(\d+(?:\.\d+)?)\s*k"),
    _compile(r"₹?\s*(\d+(?:,\d{3})*(?:\.\d+)?)", re.ASCII),
    _compile(r"salary\s*:?\s*₹?\s*(\d+(?:\.\d+)?)"),
)

LAKH = 100_000
THOUSAND = 1_000


def _format_amount(value: float) -> str:
    """Render a number as its shortest round-trip decimal string.

    Whole numbers lose the trailing ".0" (800000.0 -> "800000"); exponent
    notation is used only for very large or very small magnitudes.
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _normalize_salary(match: Match) -> Optional[str]:
    raw_amount = _group(match, 1)
    if not raw_amount:
        return None

    amount = raw_amount.replace(",", "")
    matched_text = match.group(0).lower()

    try:
        if "lakh" in matched_text:
            amount = _format_amount(float(amount) * LAKH)
        elif "k" in matched_text:
            amount = _format_amount(float(amount) * THOUSAND)
    except ValueError:
        return None

    return f"₹{amount}"


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    """Drop duplicates, keeping the first occurrence of each item."""
    return tuple(dict.fromkeys(items))


def _first_contained(candidates: Iterable[str], lower_query: str) -> Optional[str]:
    for candidate in candidates:
        if candidate.lower() in lower_query:
            return candidate
    return None


def parse_job_query(query: str) -> ParsedQuery:
    """Parse a free-text job search query into structured filters.

    Never raises for string input: fields that cannot be extracted are left
    empty (sequences) or None (single values).

    Args:
        query: Raw search text; empty and very long inputs are accepted

    Returns:
        ParsedQuery built fresh for this call

    Example:
        >>> parsed = parse_job_query("MBBS doctor in Mumbai")
        >>> parsed.qualification, parsed.location
        (('MBBS',), 'Mumbai')
    """
    query = query or ""
    lower_query = query.lower().strip()

    titles: List[str] = []
    qualifications: List[str] = []
    departments: List[str] = []
    synonyms: List[str] = []

    for qualification in QUALIFICATIONS:
        if qualification.lower() in lower_query:
            qualifications.append(qualification)
            synonyms.extend(QUALIFICATION_SYNONYMS.get(qualification, ()))

    for department in DEPARTMENTS:
        if department.lower() in lower_query:
            departments.append(department)

    location = _first_contained(LOCATIONS, lower_query)

    for key, expansions in ROLE_SYNONYMS.items():
        if key in lower_query:
            titles.extend(expansions)
            synonyms.append(key)
            synonyms.extend(expansions)

    if not titles:
        for pattern in TITLE_PATTERNS:
            match = pattern.search(query)
            if not match:
                continue
            prefix, role = _group(match, 1), _group(match, 2)
            if prefix and role:
                prefix = prefix.lower()
                titles.append(f"{prefix[:1].upper()}{prefix[1:]} {role}")
                synonyms.extend((prefix, role))
            break

    experience = None
    for pattern, normalize in EXPERIENCE_RULES:
        match = pattern.search(query)
        if match:
            experience = normalize(match)
            break

    salary = None
    for pattern in SALARY_PATTERNS:
        match = pattern.search(query)
        if match:
            salary = _normalize_salary(match)
            break

    job_type = _first_contained(JOB_TYPES, lower_query)
    if job_type is not None:
        job_type = job_type.replace("-", " ")

    company = _first_contained(COMPANY_KEYWORDS, lower_query)

    for typo, correction in TYPO_CORRECTIONS.items():
        if typo in lower_query and not any(correction in title.lower() for title in titles):
            synonyms.extend((typo, correction))

    parsed = ParsedQuery(
        title=_unique(titles),
        qualification=_unique(qualifications),
        department=_unique(departments),
        location=location,
        experience=experience,
        salary=salary,
        job_type=job_type,
        company=company,
        synonyms=_unique(synonyms),
    )

    logger.debug(
        "Parsed job query",
        extra={
            "event": "query.parsed",
            "query_length": len(query),
            "title_count": len(parsed.title),
            "qualification_count": len(parsed.qualification),
            "department_count": len(parsed.department),
            "has_location": parsed.location is not None,
            "has_experience": parsed.experience is not None,
            "has_salary": parsed.salary is not None,
        },
    )

    return parsed
