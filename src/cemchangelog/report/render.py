"""Rendering of changelog results for humans and machines."""

from __future__ import annotations

import json

from cemchangelog.diff.models import ChangelogResult

NO_CHANGES = "No changes detected."


def _section(title: str, changes: dict[str, list[str]]) -> list[str]:
    lines = [f"## {title}", ""]
    for tag_name, messages in changes.items():
        lines.append(f"### `{tag_name}`")
        lines.append("")
        lines.extend(f"- {message}" for message in messages)
        lines.append("")
    return lines


def render_markdown(result: ChangelogResult, *, title: str | None = None) -> str:
    """Render the prose changelog as Markdown, breaking changes first."""
    lines: list[str] = []
    if title:
        lines.extend([f"# {title}", ""])

    changelog = result.changelog
    if changelog.is_empty:
        lines.append(NO_CHANGES)
        return "\n".join(lines) + "\n"

    if changelog.breaking_changes:
        lines.extend(_section("Breaking Changes", changelog.breaking_changes))
    if changelog.feature_changes:
        lines.extend(_section("Features", changelog.feature_changes))
    return "\n".join(lines).rstrip("\n") + "\n"


def render_json(result: ChangelogResult, indent: int | None = 2) -> str:
    """Serialize the full result (prose and records) to JSON."""
    return json.dumps(result.to_dict(), indent=indent)
