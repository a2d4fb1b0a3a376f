"""Manifest reading and normalization."""

from cemchangelog.manifest.loader import load_manifest
from cemchangelog.manifest.models import Component, Member
from cemchangelog.manifest.normalize import CemNormalizer, ManifestNormalizer

__all__ = [
    "CemNormalizer",
    "Component",
    "ManifestNormalizer",
    "Member",
    "load_manifest",
]
