"""Application configuration management."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

LOG_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Application settings loaded from environment."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # text or json

    # Reconciliation
    validate_inputs: bool = True
    trace_logging: bool = False

    # Table rendering
    table_width: int = 12

    def __post_init__(self):
        """Validate settings after initialization."""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")
        if self.table_width < 1:
            raise ValueError("TABLE_WIDTH must be at least 1")


def load_settings_from_env() -> Settings:
    """Load settings from environment variables (and a .env file, if present)."""
    load_dotenv()

    def get_bool(key: str, default: bool = False) -> bool:
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes")

    def get_int(key: str, default: int) -> int:
        return int(os.getenv(key, str(default)))

    return Settings(
        # Logging
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "text"),

        # Reconciliation
        validate_inputs=get_bool("VALIDATE_INPUTS", True),
        trace_logging=get_bool("TRACE_LOGGING", False),

        table_width=get_int("TABLE_WIDTH", 12),
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings_from_env()


def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    get_settings.cache_clear()
