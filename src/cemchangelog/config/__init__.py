"""Config module exports."""

from cemchangelog.config.loader import load_config, merge_overrides
from cemchangelog.config.models import (
    CemChangelogConfig,
    ChangeLevel,
    ChangelogConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "merge_overrides",
    "CemChangelogConfig",
    "ChangeLevel",
    "ChangelogConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
