"""Data model for structured job search filters."""

from typing import Optional, Tuple

from pydantic import BaseModel, Field


class ParsedQuery(BaseModel):
    """Structured filters extracted from a free-text job search query.

    Field order is the serialization order used by format_parsed_query().
    Instances are frozen and the sequence fields are tuples, so a result can
    be shared between callers without copying.

    Attributes:
        title: Candidate job-title phrases
        qualification: Matched qualification tokens (canonical casing)
        department: Matched department names (canonical casing)
        location: First matching city or state
        experience: Normalized experience range, e.g. "5-7 years" or "3+ years"
        salary: Rupee amount, e.g. "₹800000"
        job_type: Employment type, e.g. "full time"
        company: Organization-type keyword, e.g. "hospital"
        synonyms: Auxiliary terms for fuzzy expansion of the search
    """

    title: Tuple[str, ...] = Field(default_factory=tuple)
    qualification: Tuple[str, ...] = Field(default_factory=tuple)
    department: Tuple[str, ...] = Field(default_factory=tuple)
    location: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    job_type: Optional[str] = None
    company: Optional[str] = None
    synonyms: Tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """True when nothing at all was extracted from the query."""
        return not any(value for value in self.model_dump().values())
