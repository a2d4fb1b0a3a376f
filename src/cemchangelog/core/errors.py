"""cem-changelog error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Input validation
- 4xxx: Manifest I/O
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Input (3xxx)
    INPUT_MISSING_MANIFEST = 3001
    INPUT_NO_COMPONENTS = 3002

    # Manifest I/O (4xxx)
    MANIFEST_FILE_NOT_FOUND = 4001
    MANIFEST_PARSE_ERROR = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CemChangelogError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INPUT_NO_COMPONENTS')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class InvalidInputError(CemChangelogError):
    """Manifests handed to the engine cannot be compared."""

    @classmethod
    def missing_manifest(cls) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INPUT_MISSING_MANIFEST,
            message="Both old and new manifests must be provided.",
        )

    @classmethod
    def empty_components(cls, *, old_count: int, new_count: int) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INPUT_NO_COMPONENTS,
            message="Both old and new manifests must have components.",
            details={"old_components": old_count, "new_components": new_count},
        )


class ConfigError(CemChangelogError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ManifestError(CemChangelogError):
    """Manifest files that cannot be read."""

    @classmethod
    def file_not_found(cls, path: str) -> "ManifestError":
        return cls(
            code=ErrorCode.MANIFEST_FILE_NOT_FOUND,
            message=f"Manifest file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ManifestError":
        return cls(
            code=ErrorCode.MANIFEST_PARSE_ERROR,
            message=f"Failed to parse manifest at {path}: {reason}",
            details={"path": path, "reason": reason},
        )
