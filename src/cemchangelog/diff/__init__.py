"""Manifest comparison engine."""

from cemchangelog.diff.emitter import ChangeAccumulator
from cemchangelog.diff.models import (
    Bucket,
    ChangeList,
    ChangelogResult,
    ChangeRecord,
    ChangeType,
)
from cemchangelog.diff.ops import CemChangelog, compare_manifests
from cemchangelog.diff.policy import ClassificationPolicy
from cemchangelog.diff.surfaces import SURFACES, Surface, compare_collections

__all__ = [
    "Bucket",
    "CemChangelog",
    "ChangeAccumulator",
    "ChangeList",
    "ChangeRecord",
    "ChangeType",
    "ChangelogResult",
    "ClassificationPolicy",
    "SURFACES",
    "Surface",
    "compare_collections",
    "compare_manifests",
]
