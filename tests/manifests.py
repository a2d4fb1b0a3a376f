"""Builders for small custom elements manifests used across tests."""

from __future__ import annotations

import copy
from typing import Any


def declaration(
    tag_name: str = "test-component",
    name: str = "TestComponent",
    **fields: Any,
) -> dict[str, Any]:
    """A custom element class declaration with optional surfaces."""
    return {
        "kind": "class",
        "name": name,
        "tagName": tag_name,
        "customElement": True,
        **fields,
    }


def manifest(*declarations: dict[str, Any], path: str = "test") -> dict[str, Any]:
    """Wrap declarations in a single-module manifest."""
    return {
        "schemaVersion": "1.0.0",
        "modules": [
            {
                "kind": "javascript-module",
                "path": path,
                "declarations": [copy.deepcopy(d) for d in declarations],
            }
        ],
    }


def field_member(name: str, type_text: str | None = None, **extra: Any) -> dict[str, Any]:
    member: dict[str, Any] = {"kind": "field", "name": name, **extra}
    if type_text is not None:
        member["type"] = {"text": type_text}
    return member


def method_member(
    name: str,
    *,
    returns: str | None = None,
    parameters: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    member: dict[str, Any] = {"kind": "method", "name": name, **extra}
    if returns is not None:
        member["return"] = {"type": {"text": returns}}
    if parameters is not None:
        member["parameters"] = parameters
    return member


def rich_declaration() -> dict[str, Any]:
    """A component exercising every surface kind."""
    return declaration(
        "rich-button",
        "RichButton",
        modulePath="src/rich-button.js",
        definitionPath="src/define.js",
        typeDefinitionPath="src/rich-button.d.ts",
        members=[
            field_member("label", "string", default='""'),
            field_member("disabled", "boolean", default="false"),
            field_member("_internal", "number", privacy="private"),
            method_member(
                "focus",
                parameters=[
                    {"name": "options", "type": {"text": "FocusOptions"}, "optional": True}
                ],
            ),
        ],
        events=[{"name": "rich-click", "type": {"text": "CustomEvent<{ count: number }>"}}],
        slots=[{"name": "", "description": "Default slot"}, {"name": "icon"}],
        attributes=[
            {"name": "label", "fieldName": "label", "type": {"text": "string"}},
            {"name": "disabled", "fieldName": "disabled", "type": {"text": "boolean"}},
        ],
        cssProperties=[{"name": "--rich-color", "default": "blue"}],
        cssParts=[{"name": "base"}],
        cssStates=[{"name": "pressed"}],
    )
