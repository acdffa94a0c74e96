#!/usr/bin/env python3
"""Verify that config.example.yaml loads against the configuration schema."""

import sys
from pathlib import Path

from medquery.config.loader import validate_config_file


def verify_example_config(config_file: Path = Path("config.example.yaml")) -> bool:
    """Validate the example configuration shipped with the repository."""
    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return False

    return validate_config_file(config_file)


if __name__ == "__main__":
    success = verify_example_config()
    sys.exit(0 if success else 1)
