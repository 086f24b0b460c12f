"""Click options shared by several skill-sync subcommands."""

from __future__ import annotations

import json

import click

source_option = click.option(
    "--source", "-s",
    type=click.Path(),
    envvar="SKILL_SYNC_SOURCE",
    default=None,
    help="Source skills directory (default: configured source).",
)

targets_option = click.option(
    "--target", "-t", "targets",
    type=click.Path(),
    multiple=True,
    envvar="SKILL_SYNC_TARGETS",
    help="Target directory; repeat for several (default: configured targets).",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)


def echo_error(message: str, output_format: str) -> None:
    """Report a command failure in the requested output format."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
