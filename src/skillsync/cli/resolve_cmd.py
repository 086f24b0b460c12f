"""``skill-sync resolve <path>`` -- Print a path the way skill-sync sees it.

Expands a leading ``~`` and makes the path absolute without checking that
it exists.

Exit Codes:
    0 -- Path resolved.
    2 -- Input was blank.
"""

from __future__ import annotations

import sys

import click

from skillsync.engine import resolve_user_path


@click.command("resolve")
@click.argument("path")
def resolve_command(path: str) -> None:
    """Expand ~ in PATH and print it as an absolute path."""
    resolved = resolve_user_path(path)
    if not resolved:
        click.echo("Error: Invalid path.")
        sys.exit(2)
    click.echo(resolved)
