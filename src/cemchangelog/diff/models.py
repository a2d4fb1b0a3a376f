"""Change records and changelog results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Bucket(Enum):
    """Severity bucket a change is reported under."""

    BREAKING = "breaking"
    FEATURE = "feature"


class ChangeType(Enum):
    """Semantic kind of a detected difference."""

    ADDED = "added"
    REMOVED = "removed"
    TYPE = "type"
    DEFAULT_VALUE = "defaultValue"
    DEPRECATION = "deprecation"
    NAME = "name"
    MODULE_PATH = "modulePath"
    DEFINITION_PATH = "definitionPath"
    TYPE_DEFINITION_PATH = "typeDefinitionPath"


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """Structured fact describing one difference."""

    api: str
    change_type: ChangeType
    name: str | None = None
    old_value: Any = None
    new_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting absent values."""
        data: dict[str, Any] = {"api": self.api, "changeType": self.change_type.value}
        if self.name is not None:
            data["name"] = self.name
        if self.old_value is not None:
            data["oldValue"] = self.old_value
        if self.new_value is not None:
            data["newValue"] = self.new_value
        return data


@dataclass(frozen=True, slots=True)
class ChangeList(Generic[T]):
    """Per-tag entries split by bucket."""

    breaking_changes: dict[str, list[T]] = field(default_factory=dict)
    feature_changes: dict[str, list[T]] = field(default_factory=dict)

    def for_bucket(self, bucket: Bucket) -> dict[str, list[T]]:
        if bucket is Bucket.BREAKING:
            return self.breaking_changes
        return self.feature_changes

    @property
    def is_empty(self) -> bool:
        return not self.breaking_changes and not self.feature_changes


@dataclass(frozen=True, slots=True)
class ChangelogResult:
    """Prose changelog and structured records for one comparison."""

    changelog: ChangeList[str]
    raw_data: ChangeList[ChangeRecord]

    @property
    def has_breaking_changes(self) -> bool:
        return bool(self.changelog.breaking_changes or self.raw_data.breaking_changes)

    @property
    def has_feature_changes(self) -> bool:
        return bool(self.changelog.feature_changes or self.raw_data.feature_changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{"changelog": ..., "rawData": ...}`` shape."""
        return {
            "changelog": {
                "breakingChanges": {
                    tag: list(messages) for tag, messages in self.changelog.breaking_changes.items()
                },
                "featureChanges": {
                    tag: list(messages) for tag, messages in self.changelog.feature_changes.items()
                },
            },
            "rawData": {
                "breakingChanges": {
                    tag: [r.to_dict() for r in records]
                    for tag, records in self.raw_data.breaking_changes.items()
                },
                "featureChanges": {
                    tag: [r.to_dict() for r in records]
                    for tag, records in self.raw_data.feature_changes.items()
                },
            },
        }
