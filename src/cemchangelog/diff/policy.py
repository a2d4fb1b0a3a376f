"""Classification of change kinds into severity buckets."""

from __future__ import annotations

from dataclasses import dataclass

from cemchangelog.config.models import ChangelogConfig
from cemchangelog.diff.models import Bucket, ChangeType

_FIXED_BUCKETS: dict[ChangeType, Bucket] = {
    ChangeType.ADDED: Bucket.FEATURE,
    ChangeType.DEPRECATION: Bucket.FEATURE,
    ChangeType.REMOVED: Bucket.BREAKING,
    ChangeType.NAME: Bucket.BREAKING,
    ChangeType.MODULE_PATH: Bucket.BREAKING,
    ChangeType.DEFINITION_PATH: Bucket.BREAKING,
    ChangeType.TYPE_DEFINITION_PATH: Bucket.BREAKING,
}


@dataclass(frozen=True, slots=True)
class ClassificationPolicy:
    """Decides whether a change kind is breaking or a feature.

    Type and default value changes are breaking unless the matching option is
    set; every other kind has a fixed bucket. Method type changes follow the
    same option as every other surface.
    """

    type_changes_as_non_breaking: bool = False
    default_values_as_non_breaking: bool = False

    @classmethod
    def from_config(cls, config: ChangelogConfig) -> ClassificationPolicy:
        return cls(
            type_changes_as_non_breaking=bool(config.type_changes_as_non_breaking),
            default_values_as_non_breaking=bool(config.default_values_as_non_breaking),
        )

    def bucket_for(self, change_type: ChangeType) -> Bucket:
        if change_type is ChangeType.TYPE:
            return Bucket.FEATURE if self.type_changes_as_non_breaking else Bucket.BREAKING
        if change_type is ChangeType.DEFAULT_VALUE:
            return Bucket.FEATURE if self.default_values_as_non_breaking else Bucket.BREAKING
        return _FIXED_BUCKETS[change_type]
