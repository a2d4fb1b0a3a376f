"""Extraction of components and members from a Custom Elements Manifest.

The comparison engine only talks to the ``ManifestNormalizer`` protocol; the
``CemNormalizer`` below understands the ``{"modules": [{"declarations": [...]}]}``
shape. Partial data is expected, so absent or malformed entries are skipped
rather than rejected.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from cemchangelog.core.logging import get_logger
from cemchangelog.manifest.models import Component, Deprecation, Member

log = get_logger("manifest.normalize")

_HIDDEN_PRIVACY = frozenset({"private", "protected"})

DEFAULT_EVENT_TYPE = "CustomEvent"


class ManifestNormalizer(Protocol):
    """Capability the engine needs to read manifests."""

    def list_components(self, manifest: Any) -> list[Component]: ...

    def list_events_with_resolved_type(self, component: Component) -> list[Member]: ...

    def list_public_methods(self, component: Component) -> list[Member]: ...

    def list_public_properties(self, component: Component) -> list[Member]: ...


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list | tuple) else []


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_deprecation(value: Any) -> Deprecation:
    if value is None or isinstance(value, bool | str):
        return value
    return bool(value)


def _collect_types(entry: Mapping[str, Any]) -> dict[str, str]:
    """Gather every ``{"text": ...}`` descriptor on an entry, keyed by source."""
    types: dict[str, str] = {}
    for key, value in entry.items():
        if isinstance(value, Mapping) and isinstance(value.get("text"), str):
            types[key] = value["text"]
    return types


def _to_member(entry: Any, *, types: Mapping[str, str] | None = None) -> Member | None:
    if not isinstance(entry, Mapping):
        return None
    name = entry.get("name")
    if not isinstance(name, str):
        return None
    # An empty name is kept: it is the default slot.
    return Member(
        name=name,
        types=dict(types) if types is not None else _collect_types(entry),
        default=entry.get("default"),
        deprecated=_as_deprecation(entry.get("deprecated")),
        field_name=_as_str(entry.get("fieldName")),
    )


def _to_members(entries: Any) -> tuple[Member, ...]:
    members = (_to_member(entry) for entry in _as_list(entries))
    return tuple(m for m in members if m is not None)


def _is_public(member: Mapping[str, Any]) -> bool:
    name = member.get("name")
    if not isinstance(name, str) or name.startswith("#"):
        return False
    if member.get("static"):
        return False
    return member.get("privacy") not in _HIDDEN_PRIVACY


def _format_parameter(param: Mapping[str, Any]) -> str:
    text = str(param.get("name", ""))
    if param.get("rest"):
        text = f"...{text}"
    param_type = param.get("type")
    if isinstance(param_type, Mapping) and param_type.get("text"):
        optional = "?" if param.get("optional") else ""
        text += f"{optional}: {param_type['text']}"
    if param.get("default") is not None:
        text += f" = {param['default']}"
    return text


def method_signature(method: Mapping[str, Any]) -> str:
    """Render a method's parameters and return type as one comparable string.

    Example:
        {"parameters": [{"name": "value", "type": {"text": "string"}}]} -> "(value: string) => void"
    """
    params = ", ".join(
        _format_parameter(p) for p in _as_list(method.get("parameters")) if isinstance(p, Mapping)
    )
    return_info = method.get("return")
    return_type = "void"
    if isinstance(return_info, Mapping):
        type_info = return_info.get("type")
        if isinstance(type_info, Mapping) and type_info.get("text"):
            return_type = type_info["text"]
    return f"({params}) => {return_type}"


class CemNormalizer:
    """Default ``ManifestNormalizer`` for the Custom Elements Manifest schema."""

    def list_components(self, manifest: Any) -> list[Component]:
        if not isinstance(manifest, Mapping):
            return []
        return [
            self._to_component(module, declaration)
            for module, declaration in self._iter_element_declarations(manifest)
        ]

    def list_events_with_resolved_type(self, component: Component) -> list[Member]:
        events: list[Member] = []
        for entry in _as_list(component.declaration.get("events")):
            if not isinstance(entry, Mapping):
                continue
            types = _collect_types(entry)
            types.setdefault("type", DEFAULT_EVENT_TYPE)
            member = _to_member(entry, types=types)
            if member is not None:
                events.append(member)
        return events

    def list_public_methods(self, component: Component) -> list[Member]:
        return self._public_members(component, "method")

    def list_public_properties(self, component: Component) -> list[Member]:
        return self._public_members(component, "field")

    def _public_members(self, component: Component, kind: str) -> list[Member]:
        members: list[Member] = []
        for entry in _as_list(component.declaration.get("members")):
            if not isinstance(entry, Mapping) or entry.get("kind") != kind:
                continue
            if not _is_public(entry):
                continue
            types = None
            if kind == "method":
                types = _collect_types(entry)
                types["type"] = method_signature(entry)
            member = _to_member(entry, types=types)
            if member is not None:
                members.append(member)
        return members

    def _iter_element_declarations(
        self, manifest: Mapping[str, Any]
    ) -> Iterator[tuple[Mapping[str, Any], Mapping[str, Any]]]:
        for module in _as_list(manifest.get("modules")):
            if not isinstance(module, Mapping):
                continue
            for declaration in _as_list(module.get("declarations")):
                if not isinstance(declaration, Mapping):
                    continue
                if declaration.get("customElement") or declaration.get("tagName"):
                    yield module, declaration

    def _to_component(
        self, module: Mapping[str, Any], declaration: Mapping[str, Any]
    ) -> Component:
        name = _as_str(declaration.get("name"))
        tag_name = _as_str(declaration.get("tagName")) or name or ""
        if not declaration.get("tagName"):
            log.debug("component_without_tag", name=name, module=module.get("path"))
        return Component(
            tag_name=tag_name,
            name=name,
            module_path=_as_str(declaration.get("modulePath")) or _as_str(module.get("path")),
            definition_path=_as_str(declaration.get("definitionPath")),
            type_definition_path=_as_str(declaration.get("typeDefinitionPath")),
            deprecated=_as_deprecation(declaration.get("deprecated")),
            css_variables=_to_members(declaration.get("cssProperties")),
            css_states=_to_members(declaration.get("cssStates")),
            css_parts=_to_members(declaration.get("cssParts")),
            attributes=_to_members(declaration.get("attributes")),
            slots=_to_members(declaration.get("slots")),
            declaration=declaration,
        )
