"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """Check a raw configuration dict for valid-but-suspicious values.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    search = config_dict.get("search", {})
    if isinstance(search, dict):
        max_length = search.get("max_query_length", 200)
        if isinstance(max_length, int) and 0 < max_length < 20:
            warning_messages.append(
                f"Short max_query_length ({max_length}) will truncate most multi-word searches"
            )

        history_items = search.get("max_history_items", 10)
        if isinstance(history_items, int) and history_items > 50:
            warning_messages.append(
                f"Large max_history_items ({history_items}) makes the history dropdown hard to scan"
            )

    logging_section = config_dict.get("logging", {})
    if isinstance(logging_section, dict):
        level = logging_section.get("level")
        if isinstance(level, str) and level.upper() == "DEBUG":
            warning_messages.append("DEBUG logging records every parsed query")

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
