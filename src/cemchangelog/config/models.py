"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CEM_CHANGELOG__SECTION__KEY)
3. YAML config file (.cem-changelog.yaml or an explicit path)
4. Built-in defaults (this file)

Environment Variable Format:
    CEM_CHANGELOG__<SECTION>__<KEY>=<VALUE>

Examples:
    CEM_CHANGELOG__LOGGING__LEVEL=DEBUG
    CEM_CHANGELOG__CHANGELOG__TYPE_SRC=expandedType
    CEM_CHANGELOG__CHANGELOG__TYPE_CHANGES_AS_NON_BREAKING=feature
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ChangeLevel = Literal["breaking", "feature", "patch", "none"]

DEFAULT_TYPE_SRC = "parsedType"


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CEM_CHANGELOG__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO adds a summary per comparison, "
        "DEBUG one line per component.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ChangelogConfig(BaseModel):
    """Classification options for the comparison engine.

    Immutable once built; an engine instance keeps the same options across calls.
    Any value set for the two ``*_as_non_breaking`` options routes that category to
    the feature bucket, including ``"breaking"`` and ``"none"``.

    camelCase aliases are accepted so manifest tooling configs can be passed as-is.

    Env vars:
        CEM_CHANGELOG__CHANGELOG__DEFAULT_VALUES_AS_NON_BREAKING
        CEM_CHANGELOG__CHANGELOG__TYPE_CHANGES_AS_NON_BREAKING
        CEM_CHANGELOG__CHANGELOG__INCLUDE_DEPRECATION_MESSAGES
        CEM_CHANGELOG__CHANGELOG__TYPE_SRC
        CEM_CHANGELOG__CHANGELOG__LOG_RESULTS
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_values_as_non_breaking: ChangeLevel | None = Field(
        default=None,
        alias="defaultValuesAsNonBreaking",
        description="Report default value changes as features instead of breaking changes.",
    )
    type_changes_as_non_breaking: ChangeLevel | None = Field(
        default=None,
        alias="typeChangesAsNonBreaking",
        description="Report type changes as features instead of breaking changes.",
    )
    include_deprecation_messages: bool = Field(
        default=False,
        alias="includeDeprecationMessages",
        description="Append the new deprecation message to deprecation sentences.",
    )
    type_src: str = Field(
        default=DEFAULT_TYPE_SRC,
        alias="typeSrc",
        description="Member key holding the preferred type descriptor. "
        "Falls back to 'type' when a member lacks it.",
    )
    log_results: bool = Field(
        default=False,
        alias="logResults",
        description="Log every detected change per component after each comparison.",
    )

    @field_validator("type_src")
    @classmethod
    def validate_type_src(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("type_src must not be empty")
        return v


class CemChangelogConfig(BaseModel):
    """Root configuration for cem-changelog."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
