"""Tests for the parser's static lookup tables."""

import pytest

from medquery.parsing import dictionaries
from medquery.parsing.dictionaries import (
    CITIES,
    COMPANY_KEYWORDS,
    JOB_TYPES,
    LOCATIONS,
    QUALIFICATION_SYNONYMS,
    QUALIFICATIONS,
    ROLE_SYNONYMS,
    STATES,
    TYPO_CORRECTIONS,
)


class TestTableShape:
    """Tests for the contents and ordering of the tables."""

    def test_role_synonym_keys_are_lower_case(self):
        """Test that keys can be compared directly with a lower-cased query."""
        assert all(key == key.lower() for key in ROLE_SYNONYMS)

    def test_role_synonym_example(self):
        """Test a known expansion."""
        assert ROLE_SYNONYMS["jr"] == ("Junior Resident", "JR", "Junior Resident Doctor")

    def test_qualification_synonyms_refer_to_qualifications(self):
        """Test that every synonym source is itself a qualification."""
        assert set(QUALIFICATION_SYNONYMS) <= set(QUALIFICATIONS)

    def test_locations_are_cities_then_states(self):
        """Test scan order of locations."""
        assert LOCATIONS[: len(CITIES)] == CITIES
        assert LOCATIONS[len(CITIES):] == STATES
        assert LOCATIONS.index("Noida") < LOCATIONS.index("Greater Noida")

    def test_job_types_and_companies_are_lower_case(self):
        """Test that phrases can be compared directly with a lower-cased query."""
        for phrase in JOB_TYPES + COMPANY_KEYWORDS:
            assert phrase == phrase.lower()

    def test_typo_example(self):
        """Test a known correction."""
        assert TYPO_CORRECTIONS["docter"] == "doctor"


class TestImmutability:
    """Tests that the tables cannot be changed at runtime."""

    @pytest.mark.parametrize("name", ["ROLE_SYNONYMS", "QUALIFICATION_SYNONYMS", "TYPO_CORRECTIONS"])
    def test_mappings_are_read_only(self, name):
        """Test that mapping tables reject assignment."""
        table = getattr(dictionaries, name)

        with pytest.raises(TypeError):
            table["new"] = "value"

    @pytest.mark.parametrize(
        "name", ["QUALIFICATIONS", "DEPARTMENTS", "CITIES", "STATES", "JOB_TYPES", "COMPANY_KEYWORDS"]
    )
    def test_sequences_are_tuples(self, name):
        """Test that list tables are tuples."""
        assert isinstance(getattr(dictionaries, name), tuple)
