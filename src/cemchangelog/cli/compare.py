"""cem-changelog compare command - diff two manifest files."""

from pathlib import Path

import click

from cemchangelog.config.loader import load_config, merge_overrides
from cemchangelog.core.errors import CemChangelogError
from cemchangelog.core.logging import configure_logging
from cemchangelog.diff.ops import CemChangelog
from cemchangelog.manifest.loader import load_manifest
from cemchangelog.report.render import render_json, render_markdown


@click.command()
@click.argument("old", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("new", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["markdown", "json"]),
    default="markdown",
    show_default=True,
    help="Output format",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the changelog to a file instead of stdout",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file (default: ./.cem-changelog.yaml if present)",
)
@click.option(
    "--type-changes-as-non-breaking",
    is_flag=True,
    help="Report type changes as features",
)
@click.option(
    "--default-values-as-non-breaking",
    is_flag=True,
    help="Report default value changes as features",
)
@click.option(
    "--include-deprecation-messages",
    is_flag=True,
    help="Append deprecation messages to deprecation changes",
)
@click.option("--type-src", help="Member key to read types from (default: parsedType)")
@click.option(
    "--fail-on-breaking",
    is_flag=True,
    help="Exit with status 1 when breaking changes are found",
)
@click.pass_context
def compare_command(
    ctx: click.Context,
    old: Path,
    new: Path,
    output_format: str,
    output: Path | None,
    config_path: Path | None,
    type_changes_as_non_breaking: bool,
    default_values_as_non_breaking: bool,
    include_deprecation_messages: bool,
    type_src: str | None,
    fail_on_breaking: bool,
) -> None:
    """Compare OLD and NEW custom elements manifests and print a changelog."""
    try:
        config = load_config(config_path)
        if not (ctx.obj or {}).get("verbose"):
            configure_logging(config=config.logging)

        changelog_config = merge_overrides(
            config.changelog,
            type_changes_as_non_breaking="feature" if type_changes_as_non_breaking else None,
            default_values_as_non_breaking="feature" if default_values_as_non_breaking else None,
            include_deprecation_messages=include_deprecation_messages or None,
            type_src=type_src,
        )
        result = CemChangelog(changelog_config).compare_manifests(
            load_manifest(old), load_manifest(new)
        )
    except CemChangelogError as e:
        raise click.ClickException(str(e)) from e

    text = render_json(result) + "\n" if output_format == "json" else render_markdown(result)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        click.echo(f"Changelog written to {output}", err=True)
    else:
        click.echo(text, nl=False)

    if fail_on_breaking and result.has_breaking_changes:
        ctx.exit(1)
