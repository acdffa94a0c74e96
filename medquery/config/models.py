"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SearchConfig(BaseModel):
    """Settings for search-box normalization and search history."""

    max_query_length: int = Field(
        200, ge=1, le=1000, description="Normalized search queries are cut to this length"
    )
    max_history_items: int = Field(
        10, ge=1, le=100, description="Number of recent searches kept in history"
    )
    history_path: Optional[str] = Field(
        None, description="JSON file for search history (in-memory when unset)"
    )

    @field_validator("history_path")
    @classmethod
    def strip_history_path(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank paths as unset."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None

    model_config = {"extra": "forbid"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "extra": "forbid"}


class AppConfig(BaseModel):
    """Root configuration object for medquery."""

    search: SearchConfig = Field(default_factory=SearchConfig, description="Search settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
