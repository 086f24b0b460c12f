"""``skill-sync config`` -- Show the default source, targets and prune policy.

Exit Codes:
    0 -- Always.
"""

from __future__ import annotations

import json

import click

from skillsync.cli.options import format_option


@click.command("config")
@format_option
@click.pass_obj
def config_command(service, output_format: str) -> None:
    """Print the defaults used when --source/--target are omitted."""
    config = service.get_config()
    if output_format == "json":
        click.echo(json.dumps(config, indent=2))
    else:
        from skillsync.cli.output import print_config
        print_config(config)
