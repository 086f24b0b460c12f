"""Directory synchronization and inspection engine.

The four operations callers use:

- ``inspect_paths(source, targets)`` -- summarize source and targets.
- ``get_skill_details(directory_path, skill_name)`` -- describe one skill.
- ``sync_skills(source, targets, prune)`` -- mirror source into targets.
- ``resolve_user_path(value)`` -- normalize a user-entered path.

The engine keeps no state between calls; every call reads the live
filesystem and returns a fresh record.

Submodules
----------
- ``paths``: Path resolution and error-swallowing filesystem probes.
- ``frontmatter``: ``SKILL.md`` header parser and preview extraction.
- ``models``: Result records.
- ``inspector``: Directory summaries and skill details.
- ``mirror``: Single-target mirror.
- ``orchestrator``: Multi-target sync with per-target failure isolation.
"""

from skillsync.engine.frontmatter import Frontmatter, extract_preview, parse_frontmatter
from skillsync.engine.inspector import (
    format_file_size,
    get_skill_details,
    inspect_paths,
    summarize_path,
)
from skillsync.engine.mirror import mirror_into
from skillsync.engine.models import (
    FileTreeEntry,
    InspectionResult,
    MirrorOutcome,
    PathSummary,
    SkillDetail,
    SyncReport,
    SyncStatus,
    SyncTargetResult,
)
from skillsync.engine.orchestrator import sync_skills
from skillsync.engine.paths import resolve_user_path

__all__ = [
    "FileTreeEntry",
    "Frontmatter",
    "InspectionResult",
    "MirrorOutcome",
    "PathSummary",
    "SkillDetail",
    "SyncReport",
    "SyncStatus",
    "SyncTargetResult",
    "extract_preview",
    "format_file_size",
    "get_skill_details",
    "inspect_paths",
    "mirror_into",
    "parse_frontmatter",
    "resolve_user_path",
    "summarize_path",
    "sync_skills",
]
