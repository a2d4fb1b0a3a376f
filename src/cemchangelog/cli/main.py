"""cem-changelog CLI."""

import click

from cemchangelog import __version__
from cemchangelog.cli.compare import compare_command
from cemchangelog.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="cem-changelog")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cem-changelog - Compatibility reports between custom elements manifests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(compare_command, name="compare")


if __name__ == "__main__":
    cli()
