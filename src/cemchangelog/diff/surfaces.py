"""Generic comparison of named member collections across API surfaces."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from cemchangelog.config.models import ChangelogConfig
from cemchangelog.diff.emitter import ChangeAccumulator, format_value
from cemchangelog.diff.models import ChangeRecord, ChangeType
from cemchangelog.manifest.models import Component, Deprecation, Member
from cemchangelog.manifest.normalize import ManifestNormalizer

MemberAccessor = Callable[[Component, ManifestNormalizer], Sequence[Member]]


@dataclass(frozen=True, slots=True)
class Surface:
    """One API surface kind: its changelog label and how to read its members."""

    label: str
    members: MemberAccessor


# Output order within a component follows this sequence.
SURFACES: tuple[Surface, ...] = (
    Surface("CSS variables", lambda c, _n: c.css_variables),
    Surface("CSS states", lambda c, _n: c.css_states),
    Surface("CSS parts", lambda c, _n: c.css_parts),
    Surface("attributes", lambda c, _n: c.attributes),
    Surface("events", lambda c, n: n.list_events_with_resolved_type(c)),
    Surface("methods", lambda c, n: n.list_public_methods(c)),
    Surface("properties", lambda c, n: n.list_public_properties(c)),
    Surface("slots", lambda c, _n: c.slots),
)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def values_differ(old: Any, new: Any) -> bool:
    """Strict inequality: values of different types always differ.

    JSON has a single number type, so ``1`` and ``1.0`` compare equal.
    """
    if _is_number(old) and _is_number(new):
        return old != new
    return type(old) is not type(new) or old != new


def deprecation_suffix(deprecated: Deprecation, config: ChangelogConfig) -> str:
    if config.include_deprecation_messages and isinstance(deprecated, str):
        return " " + deprecated
    return ""


def _name_list(members: Sequence[Member]) -> str:
    return ", ".join(f"`{m.name}`" for m in members)


def compare_collections(
    old_items: Sequence[Member],
    new_items: Sequence[Member],
    tag_name: str,
    label: str,
    acc: ChangeAccumulator,
    config: ChangelogConfig,
) -> None:
    """Report added, removed and changed members of one surface.

    Members are matched by name only. Additions come first, then removals, then
    field changes in the order of ``new_items``.
    """
    old_names = {item.name for item in old_items}
    new_names = {item.name for item in new_items}
    added = [item for item in new_items if item.name not in old_names]
    removed = [item for item in old_items if item.name not in new_names]

    if added:
        acc.emit(
            tag_name,
            f"The following {label} have been added: {_name_list(added)}",
            *(ChangeRecord(label, ChangeType.ADDED, item.name) for item in added),
        )
    if removed:
        acc.emit(
            tag_name,
            f"The following {label} have been removed: {_name_list(removed)}",
            *(ChangeRecord(label, ChangeType.REMOVED, item.name) for item in removed),
        )

    old_by_name: dict[str, Member] = {}
    for item in old_items:
        old_by_name.setdefault(item.name, item)

    for new_item in new_items:
        old_item = old_by_name.get(new_item.name)
        if old_item is None:
            continue
        _compare_member(old_item, new_item, tag_name, label, acc, config)


def _compare_member(
    old_item: Member,
    new_item: Member,
    tag_name: str,
    label: str,
    acc: ChangeAccumulator,
    config: ChangelogConfig,
) -> None:
    name = new_item.name

    if values_differ(old_item.deprecated, new_item.deprecated):
        acc.emit(
            tag_name,
            f'The deprecation status for {label} "{name}" has changed.'
            f"{deprecation_suffix(new_item.deprecated, config)}",
            ChangeRecord(
                label, ChangeType.DEPRECATION, name, old_item.deprecated, new_item.deprecated
            ),
        )

    if values_differ(old_item.default, new_item.default):
        acc.emit(
            tag_name,
            f'The default value for {label} "{name}" has changed from '
            f"`{format_value(old_item.default)}` to `{format_value(new_item.default)}`.",
            ChangeRecord(
                label, ChangeType.DEFAULT_VALUE, name, old_item.default, new_item.default
            ),
        )

    old_type = old_item.type_text(config.type_src)
    new_type = new_item.type_text(config.type_src)
    if old_type != new_type:
        acc.emit(
            tag_name,
            f'The type for "{name}" has changed from `{old_type}` to `{new_type}`.',
            ChangeRecord(label, ChangeType.TYPE, name, old_type, new_type),
        )

    if values_differ(old_item.field_name, new_item.field_name):
        acc.emit(
            tag_name,
            f'The field name for {label} "{name}" has changed from '
            f"`{format_value(old_item.field_name)}` to `{format_value(new_item.field_name)}`.",
            ChangeRecord(label, ChangeType.NAME, name, old_item.field_name, new_item.field_name),
        )
