"""Command-line entry point for medquery."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from medquery.config.exceptions import ConfigurationError
from medquery.config.loader import load_config
from medquery.config.models import AppConfig
from medquery.logging import get_logger
from medquery.logging.config import configure_logging
from medquery.logging.context import log_context
from medquery.parsing import parse_query_to_json
from medquery.search import (
    SearchHistory,
    build_search_url,
    extract_search_keywords,
    normalize_search_query,
    validate_search_query,
)

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_QUERY = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the medquery command."""
    parser = argparse.ArgumentParser(
        prog="medquery",
        description="Parse free-text medical job searches into structured filters",
    )
    parser.add_argument("query", nargs="*", help="Search text, e.g. MBBS doctor in Mumbai")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--normalize", action="store_true", help="Print the normalized search query"
    )
    mode.add_argument(
        "--keywords", action="store_true", help="Print search keywords as a JSON list"
    )
    mode.add_argument("--url", action="store_true", help="Print the job listing search URL")
    mode.add_argument("--history", action="store_true", help="Print saved search history")
    mode.add_argument(
        "--clear-history", action="store_true", help="Delete saved search history"
    )

    parser.add_argument("--location", default="", help="Location filter used with --url")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def run(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Execute the selected mode and print its output to stdout.

    Returns:
        Process exit code
    """
    search_config = app_config.search
    history = SearchHistory(
        path=search_config.history_path,
        max_items=search_config.max_history_items,
        max_query_length=search_config.max_query_length,
    )
    query = " ".join(args.query)

    if args.history:
        print(json.dumps([item.model_dump() for item in history.get()], indent=2, ensure_ascii=False))
        return EXIT_OK

    if args.clear_history:
        history.clear()
        logger.info("Search history cleared", extra={"event": "cli.history_cleared"})
        return EXIT_OK

    if args.normalize:
        print(normalize_search_query(query, search_config.max_query_length))
        return EXIT_OK

    if args.keywords or args.url:
        validation = validate_search_query(query, search_config.max_query_length)
        if not validation.valid:
            print(validation.error, file=sys.stderr)
            return EXIT_INVALID_QUERY

        if args.keywords:
            print(json.dumps(extract_search_keywords(query, search_config.max_query_length)))
        else:
            print(build_search_url(query, args.location, max_length=search_config.max_query_length))
        return EXIT_OK

    print(parse_query_to_json(query))
    if query.strip():
        history.save(query, args.location)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the medquery command.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_config(args.config)

        # CLI > environment > config file
        log_level = args.log_level or app_config.logging.level
        configure_logging(
            level=log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        with log_context(query_source="cli"):
            return run(args, app_config)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            "Configuration error",
            extra={"event": "config.error", "error_type": "ConfigurationError"},
        )
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Unexpected error",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
