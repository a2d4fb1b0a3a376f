"""Comparison of two manifests into a classified changelog.

The engine keeps only its configuration and normalizer; every call to
``compare_manifests`` works on its own ``ChangeAccumulator``, so one instance
can be reused and shared between threads.
"""

from __future__ import annotations

from typing import Any

from cemchangelog.config.models import ChangelogConfig
from cemchangelog.core.errors import InvalidInputError
from cemchangelog.core.logging import get_logger
from cemchangelog.diff.emitter import ChangeAccumulator
from cemchangelog.diff.models import Bucket, ChangelogResult, ChangeRecord, ChangeType
from cemchangelog.diff.policy import ClassificationPolicy
from cemchangelog.diff.surfaces import (
    SURFACES,
    compare_collections,
    deprecation_suffix,
    values_differ,
)
from cemchangelog.manifest.models import Component
from cemchangelog.manifest.normalize import CemNormalizer, ManifestNormalizer

log = get_logger("diff")

COMPONENT_API = "component"


def index_components(components: list[Component]) -> dict[str, Component]:
    """Map tag name to component. A repeated tag name keeps the last definition."""
    return {component.tag_name: component for component in components}


class CemChangelog:
    """Classifies the differences between an old and a new manifest."""

    def __init__(
        self,
        config: ChangelogConfig | None = None,
        normalizer: ManifestNormalizer | None = None,
    ) -> None:
        self.config = config or ChangelogConfig()
        self.normalizer: ManifestNormalizer = normalizer or CemNormalizer()
        self.policy = ClassificationPolicy.from_config(self.config)

    def compare_manifests(self, old_manifest: Any, new_manifest: Any) -> ChangelogResult:
        """Compare two manifests.

        Raises:
            InvalidInputError: If a manifest is missing or has no components.
        """
        if old_manifest is None or new_manifest is None:
            raise InvalidInputError.missing_manifest()

        old_list = self.normalizer.list_components(old_manifest)
        new_list = self.normalizer.list_components(new_manifest)
        if not old_list or not new_list:
            raise InvalidInputError.empty_components(
                old_count=len(old_list), new_count=len(new_list)
            )

        old_components = index_components(old_list)
        new_components = index_components(new_list)
        acc = ChangeAccumulator(self.policy)

        for tag_name, component in old_components.items():
            if tag_name not in new_components:
                acc.emit(
                    tag_name,
                    "This component has been removed in the new manifest.",
                    ChangeRecord(COMPONENT_API, ChangeType.REMOVED, component.name),
                )

        for tag_name, component in new_components.items():
            if tag_name not in old_components:
                acc.emit(
                    tag_name,
                    "This component has been added in the new manifest.",
                    ChangeRecord(COMPONENT_API, ChangeType.ADDED, component.name),
                )

        common = [tag for tag in new_components if tag in old_components]
        for tag_name in common:
            self._compare_component(old_components[tag_name], new_components[tag_name], acc)

        result = acc.build()
        log.info(
            "manifests_compared",
            components_compared=len(common),
            breaking=acc.count(Bucket.BREAKING),
            feature=acc.count(Bucket.FEATURE),
        )
        if self.config.log_results:
            _log_result(result)
        return result

    def _compare_component(self, old: Component, new: Component, acc: ChangeAccumulator) -> None:
        tag_name = new.tag_name
        log.debug("comparing_component", tag_name=tag_name)
        self._compare_component_fields(old, new, acc)
        for surface in SURFACES:
            compare_collections(
                surface.members(old, self.normalizer),
                surface.members(new, self.normalizer),
                tag_name,
                surface.label,
                acc,
                self.config,
            )

    def _compare_component_fields(
        self, old: Component, new: Component, acc: ChangeAccumulator
    ) -> None:
        tag_name = new.tag_name

        def record(change_type: ChangeType, old_value: Any, new_value: Any) -> ChangeRecord:
            return ChangeRecord(COMPONENT_API, change_type, tag_name, old_value, new_value)

        if values_differ(old.name, new.name):
            acc.emit(
                tag_name,
                f"The class name has changed from `{old.name}` to `{new.name}`.",
                record(ChangeType.NAME, old.name, new.name),
            )
        if values_differ(old.module_path, new.module_path):
            acc.emit(
                tag_name,
                f'The module path has changed to "{new.module_path}".',
                record(ChangeType.MODULE_PATH, old.module_path, new.module_path),
            )
        if values_differ(old.definition_path, new.definition_path):
            acc.emit(
                tag_name,
                "The definition path where this is defined has changed to "
                f'"{new.definition_path}".',
                record(ChangeType.DEFINITION_PATH, old.definition_path, new.definition_path),
            )
        if values_differ(old.type_definition_path, new.type_definition_path):
            acc.emit(
                tag_name,
                f'The type path has changed to "{new.type_definition_path}".',
                record(
                    ChangeType.TYPE_DEFINITION_PATH,
                    old.type_definition_path,
                    new.type_definition_path,
                ),
            )
        if values_differ(old.deprecated, new.deprecated):
            acc.emit(
                tag_name,
                "The deprecation status has changed."
                f"{deprecation_suffix(new.deprecated, self.config)}",
                record(ChangeType.DEPRECATION, old.deprecated, new.deprecated),
            )


def _log_result(result: ChangelogResult) -> None:
    for tag_name, messages in result.changelog.breaking_changes.items():
        log.info("breaking_changes", tag_name=tag_name, changes=messages)
    for tag_name, messages in result.changelog.feature_changes.items():
        log.info("feature_changes", tag_name=tag_name, changes=messages)


def compare_manifests(
    old_manifest: Any,
    new_manifest: Any,
    config: ChangelogConfig | None = None,
) -> ChangelogResult:
    """One-shot comparison with a fresh engine."""
    return CemChangelog(config).compare_manifests(old_manifest, new_manifest)
