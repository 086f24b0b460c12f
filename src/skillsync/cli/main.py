"""skill-sync CLI -- Keep agent skill directories mirrored from one source.

Entry point for the ``skill-sync`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    inspect  -- Summarize the source and target directories.
    details  -- Show manifest metadata and files of one skill.
    sync     -- Mirror the source into every target.
    resolve  -- Print a user-entered path in resolved form.
    config   -- Show the configured defaults.

Usage::

    skill-sync inspect
    skill-sync sync                                  # Configured defaults
    skill-sync sync -s ~/.codex/skills -t ~/agents --no-prune
    skill-sync details ~/.codex/skills pdf-tools --tree
    skill-sync resolve ~/agents
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from skillsync import __version__
from skillsync.cli.config_cmd import config_command
from skillsync.cli.details_cmd import details_command
from skillsync.cli.inspect_cmd import inspect_command
from skillsync.cli.resolve_cmd import resolve_command
from skillsync.cli.sync_cmd import sync_command
from skillsync.config import load_config
from skillsync.exceptions import ConfigError
from skillsync.service import SkillSyncService


def _configure_logging(verbose: bool) -> None:
    """With --verbose, route ``skillsync`` log records to stderr through Rich."""
    if not verbose:
        return
    logger = logging.getLogger("skillsync")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_file",
    type=click.Path(dir_okay=False),
    envvar="SKILL_SYNC_CONFIG",
    default=None,
    help="YAML config file (default: ~/.skill-sync/config.yaml).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log every step of inspection and sync.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """skill-sync: Mirror one skills directory into many.

    Keeps a canonical source directory of skills copied into each target
    directory, and inspects what every location currently holds.
    """
    _configure_logging(verbose)
    try:
        config = load_config(config_file)
    except ConfigError as exc:
        click.echo(f"Error: {exc}")
        sys.exit(2)
    ctx.obj = SkillSyncService(config)


# Register all subcommands
cli.add_command(inspect_command)
cli.add_command(details_command)
cli.add_command(sync_command)
cli.add_command(resolve_command)
cli.add_command(config_command)
