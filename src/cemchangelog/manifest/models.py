"""Normalized component and member models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Deprecation = bool | str | None


@dataclass(frozen=True, slots=True)
class Member:
    """One entry of a component surface (property, method, event, slot, ...).

    ``types`` maps a type source key (``type``, ``parsedType``, ``expandedType``)
    to its text so the engine can pick the configured source.
    """

    name: str
    types: Mapping[str, str] = field(default_factory=dict)
    default: Any = None
    deprecated: Deprecation = None
    field_name: str | None = None

    def type_text(self, type_src: str) -> str:
        """Resolve the effective type text, falling back to the declared type."""
        return self.types.get(type_src) or self.types.get("type") or ""


@dataclass(frozen=True, slots=True)
class Component:
    """A custom element definition keyed by its tag name.

    Properties, methods and events are derived from ``declaration`` by the
    normalizer on demand; the remaining surfaces are extracted up front.
    """

    tag_name: str
    name: str | None = None
    module_path: str | None = None
    definition_path: str | None = None
    type_definition_path: str | None = None
    deprecated: Deprecation = None
    css_variables: tuple[Member, ...] = ()
    css_states: tuple[Member, ...] = ()
    css_parts: tuple[Member, ...] = ()
    attributes: tuple[Member, ...] = ()
    slots: tuple[Member, ...] = ()
    declaration: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
