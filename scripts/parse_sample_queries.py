#!/usr/bin/env python3
"""Sample query harness for eyeballing parser output.

Parses every query listed in a YAML file and prints one summary row per
query, followed by the full JSON for any query whose result differs from the
expectations recorded next to it.

Usage:
    python scripts/parse_sample_queries.py
    python scripts/parse_sample_queries.py --samples tests/fixtures/sample_queries.yaml --verbose
"""

import argparse
import sys
from pathlib import Path

import yaml

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from medquery.logging.config import configure_logging
from medquery.parsing import format_parsed_query, parse_job_query

DEFAULT_SAMPLES = Path(__file__).parent.parent / "tests" / "fixtures" / "sample_queries.yaml"


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def check_expectations(parsed, expected: dict) -> list:
    """Return human-readable mismatches between a result and its expectations."""
    problems = []
    for field_name, expected_value in (expected or {}).items():
        actual = getattr(parsed, field_name)
        if isinstance(actual, tuple):
            missing = [value for value in expected_value if value not in actual]
            if missing:
                problems.append(f"{field_name} missing {missing}")
        elif actual != expected_value:
            problems.append(f"{field_name}: expected {expected_value!r}, got {actual!r}")
    return problems


def main() -> int:
    parser = argparse.ArgumentParser(description="Parse sample job queries")
    parser.add_argument("--samples", type=Path, default=DEFAULT_SAMPLES, help="YAML file of samples")
    parser.add_argument("--verbose", action="store_true", help="Print JSON for every query")
    args = parser.parse_args()

    configure_logging(level="WARNING")

    with open(args.samples, "r", encoding="utf-8") as f:
        samples = yaml.safe_load(f) or []

    print_header(f"Parsing {len(samples)} sample queries")

    failures = 0
    for sample in samples:
        query = sample["query"]
        parsed = parse_job_query(query)
        problems = check_expectations(parsed, sample.get("expect"))

        status = "✗" if problems else "✓"
        print(
            f"{status} {query[:40]:<40} "
            f"loc={parsed.location or '-':<10} exp={parsed.experience or '-':<10} "
            f"salary={parsed.salary or '-'}"
        )

        if problems:
            failures += 1
            for problem in problems:
                print(f"    - {problem}")

        if problems or args.verbose:
            print(format_parsed_query(parsed))

    print_header(f"{len(samples) - failures} passed, {failures} failed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
