"""Per-call accumulation of prose messages and structured records."""

from __future__ import annotations

import json
from typing import Any

from cemchangelog.diff.models import Bucket, ChangeList, ChangelogResult, ChangeRecord
from cemchangelog.diff.policy import ClassificationPolicy


def format_value(value: Any) -> str:
    """Render a manifest value inside a changelog sentence.

    Absent values read as ``undefined`` and booleans in lower case, matching how
    manifests spell them.
    """
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


class ChangeAccumulator:
    """Collects messages and records for one ``compare_manifests`` call.

    A message and the records it describes always land in the same bucket
    under the same tag. Not shared between calls.
    """

    def __init__(self, policy: ClassificationPolicy) -> None:
        self.policy = policy
        self._messages: ChangeList[str] = ChangeList()
        self._records: ChangeList[ChangeRecord] = ChangeList()

    def emit(self, tag_name: str, message: str, *records: ChangeRecord) -> Bucket:
        """Append ``message`` and ``records`` to the bucket their change type maps to.

        All records passed together must share one change type.
        """
        bucket = self.policy.bucket_for(records[0].change_type)
        self._messages.for_bucket(bucket).setdefault(tag_name, []).append(message)
        self._records.for_bucket(bucket).setdefault(tag_name, []).extend(records)
        return bucket

    def count(self, bucket: Bucket) -> int:
        return sum(len(messages) for messages in self._messages.for_bucket(bucket).values())

    def build(self) -> ChangelogResult:
        """Snapshot the collected changes, dropping tags with no entries."""
        return ChangelogResult(
            changelog=_pruned(self._messages),
            raw_data=_pruned(self._records),
        )


def _pruned(changes: ChangeList[Any]) -> ChangeList[Any]:
    return ChangeList(
        breaking_changes={
            tag: list(entries) for tag, entries in changes.breaking_changes.items() if entries
        },
        feature_changes={
            tag: list(entries) for tag, entries in changes.feature_changes.items() if entries
        },
    )
