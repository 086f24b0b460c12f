"""``skill-sync sync`` -- Mirror the source directory into every target.

Each top-level source entry replaces the entry of the same name in each
target. With ``--prune`` (the configured default) target entries missing
from the source are deleted, making the target an exact mirror. A target
that fails is reported and the remaining targets are still synced.

Exit Codes:
    0 -- Every target was synced or skipped.
    1 -- One or more targets failed.
    2 -- The source is invalid, or another sync is already running.
"""

from __future__ import annotations

import json
import sys

import click

from skillsync.cli.options import echo_error, format_option, source_option, targets_option
from skillsync.exceptions import SourceInvalidError, SyncBusyError


@click.command("sync")
@source_option
@targets_option
@click.option(
    "--prune/--no-prune",
    default=None,
    help="Delete target entries absent from the source (default: configured).",
)
@format_option
@click.pass_obj
def sync_command(
    service,
    source: str | None,
    targets: tuple[str, ...],
    prune: bool | None,
    output_format: str,
) -> None:
    """Copy every skill from the source into each target directory.

    Exit code 0 if all targets succeeded, 1 if any target failed.
    """
    try:
        report = service.sync(source=source, targets=list(targets), prune=prune)
    except (SourceInvalidError, SyncBusyError) as exc:
        echo_error(str(exc), output_format)
        sys.exit(2)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        from skillsync.cli.output import print_sync_report
        print_sync_report(report)

    sys.exit(0 if report.success else 1)
