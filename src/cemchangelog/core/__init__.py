"""Core module exports."""

from cemchangelog.core.errors import (
    CemChangelogError,
    ConfigError,
    ErrorCode,
    InvalidInputError,
    ManifestError,
)
from cemchangelog.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "CemChangelogError",
    "ConfigError",
    "ErrorCode",
    "InvalidInputError",
    "ManifestError",
    # Logging
    "configure_logging",
    "get_logger",
]
