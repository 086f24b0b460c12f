"""``skill-sync details <directory> <skill-name>`` -- Describe one skill.

Reads the skill's ``SKILL.md`` header (name, description, short
description), the first prose line of its body, and walks the skill's
files to total their count and size.

Exit Codes:
    0 -- Details produced (including "skill not found").
    2 -- The directory is invalid or the skill name is unsafe.
"""

from __future__ import annotations

import json
import sys

import click

from skillsync.cli.options import echo_error, format_option
from skillsync.exceptions import InvalidInputError


@click.command("details")
@click.argument("directory", type=click.Path())
@click.argument("skill_name")
@format_option
@click.option(
    "--tree", "show_tree",
    is_flag=True,
    default=False,
    help="Also print the skill's file tree (text output only).",
)
@click.pass_obj
def details_command(
    service,
    directory: str,
    skill_name: str,
    output_format: str,
    show_tree: bool,
) -> None:
    """Show manifest metadata and file statistics for SKILL_NAME in DIRECTORY."""
    try:
        detail = service.get_skill_details(directory, skill_name)
    except InvalidInputError as exc:
        echo_error(str(exc), output_format)
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(detail.to_dict(), indent=2))
    else:
        from skillsync.cli.output import print_skill_detail
        print_skill_detail(detail, show_tree=show_tree)
