"""Result records produced by the inspection and sync engine.

Every record is built fresh by the call that returns it and is never
mutated afterwards or persisted. ``to_dict()`` gives the JSON-ready form
used by the CLI's ``--format json`` output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Directory summaries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PathSummary:
    """What lives at one filesystem location.

    Attributes:
        path: Absolute, normalized path.
        exists: Whether anything exists at ``path``.
        is_directory: Whether ``path`` is a directory. False when missing.
        skill_count: Number of skill subdirectories. 0 unless a directory.
        skill_names: Sorted skill subdirectory names.
    """

    path: str
    exists: bool = False
    is_directory: bool = False
    skill_count: int = 0
    skill_names: list[str] = field(default_factory=list)

    @property
    def kind(self) -> str:
        """``"missing"``, ``"file"`` or ``"directory"``."""
        if not self.exists:
            return "missing"
        return "directory" if self.is_directory else "file"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "exists": self.exists,
            "is_directory": self.is_directory,
            "skill_count": self.skill_count,
            "skill_names": list(self.skill_names),
        }


@dataclass(frozen=True)
class InspectionResult:
    """Summaries of the source and every target, taken at ``checked_at``."""

    checked_at: str
    source: PathSummary
    targets: list[PathSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "checked_at": self.checked_at,
            "source": self.source.to_dict(),
            "targets": [t.to_dict() for t in self.targets],
        }


# ---------------------------------------------------------------------------
# Skill details
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileTreeEntry:
    """One file or directory inside a skill.

    ``relative_path`` is relative to the skill root and always uses ``/``.
    """

    name: str
    relative_path: str
    type: str  # "file" or "directory"
    size: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "relative_path": self.relative_path,
            "type": self.type,
            "size": self.size,
        }


@dataclass(frozen=True)
class SkillDetail:
    """Everything the UI shows about a single skill directory.

    When the skill is missing or not a directory, only the identity and
    the two flags are meaningful: metadata is empty and ``file_tree`` is
    None.

    Attributes:
        directory_path: Resolved parent directory.
        skill_name: Name as passed by the caller.
        skill_path: ``directory_path`` joined with ``skill_name``.
        exists: Whether anything exists at ``skill_path``.
        is_directory: Whether ``skill_path`` is a directory.
        has_manifest_file: Whether ``SKILL.md`` sits directly inside.
        title: Header ``name``, falling back to ``skill_name``.
        description: Header ``description``.
        short_description: ``metadata.short-description`` from the header.
        preview: First prose line of the manifest body.
        manifest_content: Raw manifest text.
        child_directory_count: Number of immediate subdirectories.
        child_directories: Sorted immediate subdirectory names.
        file_tree: Pre-order walk of the whole skill, or None.
        file_count: Number of files in ``file_tree``.
        directory_count: Number of directories in ``file_tree``.
        total_size: Sum of file sizes in bytes.
        total_size_formatted: ``total_size`` as B / KB / MB.
    """

    directory_path: str
    skill_name: str
    skill_path: str
    exists: bool = False
    is_directory: bool = False
    has_manifest_file: bool = False
    title: str = ""
    description: str = ""
    short_description: str = ""
    preview: str = ""
    manifest_content: str = ""
    child_directory_count: int = 0
    child_directories: list[str] = field(default_factory=list)
    file_tree: list[FileTreeEntry] | None = None
    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0
    total_size_formatted: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "directory_path": self.directory_path,
            "skill_name": self.skill_name,
            "skill_path": self.skill_path,
            "exists": self.exists,
            "is_directory": self.is_directory,
            "has_manifest_file": self.has_manifest_file,
            "title": self.title,
            "description": self.description,
            "short_description": self.short_description,
            "preview": self.preview,
            "manifest_content": self.manifest_content,
            "child_directory_count": self.child_directory_count,
            "child_directories": list(self.child_directories),
            "file_tree": (
                [e.to_dict() for e in self.file_tree]
                if self.file_tree is not None else None
            ),
            "file_count": self.file_count,
            "directory_count": self.directory_count,
            "total_size": self.total_size,
            "total_size_formatted": self.total_size_formatted,
        }


# ---------------------------------------------------------------------------
# Sync results
# ---------------------------------------------------------------------------


class SyncStatus(str, Enum):
    """Outcome of syncing a single target."""

    OK = "ok"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MirrorOutcome:
    """Counts returned by mirroring the source into one target."""

    copied: int
    removed: int
    skill_names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SyncTargetResult:
    """Per-target line of a ``SyncReport``."""

    target: str
    status: SyncStatus
    copied: int = 0
    removed: int = 0
    skill_count: int = 0
    skill_names: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "status": self.status.value,
            "copied": self.copied,
            "removed": self.removed,
            "skill_count": self.skill_count,
            "skill_names": list(self.skill_names),
            "error": self.error,
        }


@dataclass(frozen=True)
class SyncReport:
    """Aggregate outcome of one sync run across all targets.

    ``success`` is False as soon as any target has status ``error``;
    the other targets are still synced and reported.
    """

    success: bool
    source: str
    prune: bool
    started_at: str
    finished_at: str
    duration_ms: int
    source_entry_count: int
    results: list[SyncTargetResult] = field(default_factory=list)

    @property
    def first_error(self) -> str | None:
        """Message of the first failed target, for use as a headline."""
        for result in self.results:
            if result.status is SyncStatus.ERROR:
                return result.error
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "source": self.source,
            "prune": self.prune,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "duration_ms": self.duration_ms,
            "source_entry_count": self.source_entry_count,
            "results": [r.to_dict() for r in self.results],
        }
