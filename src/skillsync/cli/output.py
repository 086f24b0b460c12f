"""Rich output formatting helpers for the skill-sync CLI.

Provides consistent terminal output for inspection summaries, skill
details and sync reports.

Status Color Mapping:
    ok = green, skipped = yellow, error = bold red
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from skillsync.engine import (
    InspectionResult,
    PathSummary,
    SkillDetail,
    SyncReport,
    SyncStatus,
    format_file_size,
)

_STATUS_STYLES: dict[SyncStatus, str] = {
    SyncStatus.OK: "green",
    SyncStatus.SKIPPED: "yellow",
    SyncStatus.ERROR: "bold red",
}

# Skill names shown per row before the list is truncated.
_NAME_PREVIEW_LIMIT = 6

console = Console()


def status_style(status: SyncStatus) -> str:
    """Return the Rich style string for a sync status."""
    return _STATUS_STYLES.get(status, "white")


def _preview_names(names: list[str], limit: int = _NAME_PREVIEW_LIMIT) -> str:
    if not names:
        return "-"
    shown = ", ".join(names[:limit])
    hidden = len(names) - limit
    return f"{shown} (+{hidden} more)" if hidden > 0 else shown


def _state_text(summary: PathSummary) -> Text:
    if summary.kind == "missing":
        return Text("missing", style="dim")
    if summary.kind == "file":
        return Text("not a directory", style="yellow")
    return Text("ok", style="green")


def print_inspection(result: InspectionResult) -> None:
    """Print a table with the source and every target.

    Args:
        result: Inspection snapshot to render.
    """
    table = Table(title="Skill Directories", show_header=True, header_style="bold")
    table.add_column("Role", style="bold")
    table.add_column("Path")
    table.add_column("State", justify="center")
    table.add_column("Skills", justify="right")
    table.add_column("Names", style="dim")

    rows = [("source", result.source)] + [("target", t) for t in result.targets]
    for role, summary in rows:
        table.add_row(
            role, escape(summary.path), _state_text(summary),
            str(summary.skill_count), escape(_preview_names(summary.skill_names)),
        )

    console.print(table)
    console.print(f"[dim]Checked at {result.checked_at}[/dim]")


def print_skill_detail(detail: SkillDetail, show_tree: bool = False) -> None:
    """Print the metadata and optional file tree of one skill."""
    if not detail.exists:
        console.print(f"[yellow]Skill not found:[/yellow] {escape(detail.skill_path)}")
        return
    if not detail.is_directory:
        console.print(f"[yellow]Not a directory:[/yellow] {escape(detail.skill_path)}")
        return

    header = Text.assemble(
        ("Skill: ", "bold"), (detail.title, ""),
        ("  Path: ", "bold"), (detail.skill_path, "dim"),
    )
    console.print(Panel(header, title="Skill Details"))
    if detail.short_description:
        console.print(f"  Summary:     {escape(detail.short_description)}")
    if detail.description:
        console.print(f"  Description: {escape(detail.description)}")
    if detail.preview:
        console.print(f"  Preview:     [italic]{escape(detail.preview)}[/italic]")
    if not detail.has_manifest_file:
        console.print("  [dim]No SKILL.md manifest.[/dim]")
    console.print(
        f"  Contents:    [bold]{detail.file_count}[/bold] files, "
        f"[bold]{detail.directory_count}[/bold] directories, "
        f"{detail.total_size_formatted}"
    )

    if show_tree and detail.file_tree:
        tree = Tree(f"[bold]{escape(detail.skill_name)}[/bold]")
        nodes: dict[str, Tree] = {"": tree}
        for entry in detail.file_tree:
            parent_key = entry.relative_path.rpartition("/")[0]
            parent = nodes.get(parent_key, tree)
            if entry.type == "directory":
                nodes[entry.relative_path] = parent.add(f"[blue]{escape(entry.name)}/[/blue]")
            else:
                parent.add(f"{escape(entry.name)} [dim]({format_file_size(entry.size)})[/dim]")
        console.print(tree)


def print_sync_report(report: SyncReport) -> None:
    """Print per-target sync results followed by a one-line summary.

    The first error message, if any, is shown as a headline above the
    table so failures stand out while successful targets stay visible.
    """
    if report.first_error:
        console.print(
            Panel(f"[bold red]{escape(report.first_error)}[/bold red]", title="Sync Error")
        )

    table = Table(title="Sync Results", show_header=True, header_style="bold")
    table.add_column("Target", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Copied", justify="right")
    table.add_column("Removed", justify="right")
    table.add_column("Skills", justify="right")
    table.add_column("Note", style="dim")

    for result in report.results:
        table.add_row(
            escape(result.target),
            Text(result.status.value.upper(), style=status_style(result.status)),
            str(result.copied), str(result.removed), str(result.skill_count),
            escape(result.error or ""),
        )
    console.print(table)

    ok = sum(1 for r in report.results if r.status is SyncStatus.OK)
    failed = sum(1 for r in report.results if r.status is SyncStatus.ERROR)
    parts = [
        f"[bold]{report.source_entry_count}[/bold] source entries",
        f"[green]{ok} synced[/green]",
    ]
    if failed:
        parts.append(f"[red]{failed} failed[/red]")
    parts.append("mirror mode" if report.prune else "keep extras")
    parts.append(f"{report.duration_ms} ms")
    console.print(" | ".join(parts))


def print_config(config: dict[str, Any]) -> None:
    """Print the effective default source, targets and prune policy."""
    console.print(f"  Source:  [bold]{escape(config['source'])}[/bold]")
    for target in config["targets"]:
        console.print(f"  Target:  {escape(target)}")
    console.print(f"  Prune:   {'yes' if config['prune'] else 'no'}")

