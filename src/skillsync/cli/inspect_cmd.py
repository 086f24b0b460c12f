"""``skill-sync inspect`` -- Summarize the source and target directories.

Reports, for the source and each target, whether the path exists, whether
it is a directory, and which skill subdirectories it holds. Missing
targets are reported, never treated as errors.

Exit Codes:
    0 -- Always (inspection cannot fail).
"""

from __future__ import annotations

import json

import click

from skillsync.cli.options import format_option, source_option, targets_option


@click.command("inspect")
@source_option
@targets_option
@format_option
@click.pass_obj
def inspect_command(
    service,
    source: str | None,
    targets: tuple[str, ...],
    output_format: str,
) -> None:
    """Show which skills the source and each target currently hold.

    Without --source/--target the configured defaults are inspected.
    """
    result = service.inspect(source=source, targets=list(targets))

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from skillsync.cli.output import print_inspection
        print_inspection(result)
