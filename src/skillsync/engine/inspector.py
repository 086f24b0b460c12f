"""Read-only inspection of skill directories.

Two entry points feed the UI:

- ``inspect_paths`` summarizes the source and every target directory
  (exists? directory? which skills?). It never raises: missing or
  unreadable locations come back as zeroed summaries.
- ``get_skill_details`` describes one skill: its manifest header, a
  preview line, and a full file tree with sizes. It raises
  ``InvalidInputError`` only for an unusable parent directory or an
  unsafe skill name.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from skillsync.config import DEFAULT_SOURCE, DEFAULT_TARGETS, MANIFEST_FILENAME
from skillsync.engine.frontmatter import extract_preview, parse_frontmatter
from skillsync.engine.models import (
    FileTreeEntry,
    InspectionResult,
    PathSummary,
    SkillDetail,
)
from skillsync.engine.paths import (
    dedupe_paths,
    entry_is_dir,
    is_directory,
    is_ignored,
    list_skill_names,
    path_exists,
    read_entries_safe,
    resolve_user_path,
)
from skillsync.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_KIB = 1024
_MIB = 1024 * 1024

# Upper bound on threads used to summarize targets in parallel.
_MAX_INSPECT_WORKERS = 8


def utc_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_file_size(size: int) -> str:
    """Human-readable size using binary thresholds (B, KB, MB)."""
    if size < _KIB:
        return f"{size} B"
    if size < _MIB:
        return f"{size / _KIB:.1f} KB"
    return f"{size / _MIB:.1f} MB"


def is_safe_skill_name(value: Any) -> bool:
    """Reject names that could escape the parent directory."""
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    if not trimmed or trimmed in (".", ".."):
        return False
    return "/" not in trimmed and "\\" not in trimmed


# ---------------------------------------------------------------------------
# Directory summaries
# ---------------------------------------------------------------------------


def summarize_path(path: str) -> PathSummary:
    """Summarize one location. Never raises."""
    resolved = resolve_user_path(path)

    if not resolved or not path_exists(resolved):
        return PathSummary(path=resolved)

    if not is_directory(resolved):
        return PathSummary(path=resolved, exists=True)

    skill_names = list_skill_names(read_entries_safe(resolved))
    return PathSummary(
        path=resolved,
        exists=True,
        is_directory=True,
        skill_count=len(skill_names),
        skill_names=skill_names,
    )


def inspect_paths(
    source: str | None = None,
    targets: Iterable[str] | None = None,
) -> InspectionResult:
    """Summarize the source directory and each target directory.

    Args:
        source: Source directory. ``None`` means ``DEFAULT_SOURCE``.
        targets: Target directories. ``None`` means ``DEFAULT_TARGETS``.
            Duplicates (after resolution) are dropped, first one wins.

    Returns:
        An ``InspectionResult`` whose ``targets`` follow the input order.
    """
    resolved_source = resolve_user_path(DEFAULT_SOURCE if source is None else source)
    resolved_targets = dedupe_paths(DEFAULT_TARGETS if targets is None else targets)

    source_summary = summarize_path(resolved_source)
    if resolved_targets:
        workers = min(_MAX_INSPECT_WORKERS, len(resolved_targets))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            target_summaries = list(pool.map(summarize_path, resolved_targets))
    else:
        target_summaries = []

    return InspectionResult(
        checked_at=utc_timestamp(),
        source=source_summary,
        targets=target_summaries,
    )


# ---------------------------------------------------------------------------
# Skill details
# ---------------------------------------------------------------------------


def walk_directory(root: str | Path) -> list[FileTreeEntry]:
    """Pre-order walk of ``root``: each directory precedes its contents.

    Siblings are visited in name order. Symlinks are listed but never
    followed. A file whose size cannot be read is reported with size 0.
    """
    results: list[FileTreeEntry] = []

    def walk(current: Path, prefix: str) -> None:
        entries = sorted(read_entries_safe(current), key=lambda e: e.name)
        for entry in entries:
            if is_ignored(entry.name):
                continue
            relative = f"{prefix}{entry.name}"
            if entry_is_dir(entry):
                results.append(FileTreeEntry(entry.name, relative, "directory", 0))
                walk(entry, f"{relative}/")
            else:
                results.append(FileTreeEntry(entry.name, relative, "file", _file_size(entry)))

    walk(Path(root), "")
    return results


def _file_size(entry: Path) -> int:
    try:
        return entry.stat().st_size
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", entry, exc)
        return 0


def get_skill_details(directory_path: str, skill_name: str) -> SkillDetail:
    """Describe the skill ``skill_name`` inside ``directory_path``.

    Args:
        directory_path: Parent directory holding skills (``~`` allowed).
        skill_name: Plain directory name of the skill.

    Returns:
        A ``SkillDetail``. A missing skill, or one that is a file, is a
        normal result with ``exists``/``is_directory`` set accordingly.

    Raises:
        InvalidInputError: If ``directory_path`` is not an existing
            directory, or ``skill_name`` is empty, ``.``, ``..``, or
            contains a path separator.
    """
    resolved_directory = resolve_user_path(directory_path)
    if not resolved_directory or not is_directory(resolved_directory):
        raise InvalidInputError(
            f"Directory is missing or invalid: {resolved_directory or directory_path!r}"
        )

    if not is_safe_skill_name(skill_name):
        raise InvalidInputError(f"Invalid skill name: {skill_name!r}")

    skill_path = Path(resolved_directory) / skill_name
    identity = {
        "directory_path": resolved_directory,
        "skill_name": skill_name,
        "skill_path": str(skill_path),
    }

    if not path_exists(skill_path):
        return SkillDetail(**identity)

    if not is_directory(skill_path):
        return SkillDetail(**identity, exists=True)

    child_directories = list_skill_names(read_entries_safe(skill_path))
    manifest_path = skill_path / MANIFEST_FILENAME
    has_manifest = path_exists(manifest_path)

    title = skill_name
    description = short_description = preview = manifest_content = ""
    if has_manifest:
        try:
            # newline="" keeps the manifest text byte-for-byte, CRLF included.
            with manifest_path.open(encoding="utf-8", newline="") as fh:
                manifest_content = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read manifest %s: %s", manifest_path, exc)
        else:
            header = parse_frontmatter(manifest_content)
            title = header.name or skill_name
            description = header.description
            short_description = header.short_description
            preview = extract_preview(header.body)

    file_tree = walk_directory(skill_path)
    file_count = sum(1 for e in file_tree if e.type == "file")
    total_size = sum(e.size for e in file_tree if e.type == "file")

    return SkillDetail(
        **identity,
        exists=True,
        is_directory=True,
        has_manifest_file=has_manifest,
        title=title,
        description=description,
        short_description=short_description,
        preview=preview,
        manifest_content=manifest_content,
        child_directory_count=len(child_directories),
        child_directories=child_directories,
        file_tree=file_tree,
        file_count=file_count,
        directory_count=len(file_tree) - file_count,
        total_size=total_size,
        total_size_formatted=format_file_size(total_size),
    )
