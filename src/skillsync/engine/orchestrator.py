"""Run the mirror against every target and aggregate a ``SyncReport``.

The source is validated and listed exactly once, so every target sees the
same snapshot. Targets are processed one after another in the order given.
A failing target is recorded and the run moves on to the next one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from skillsync.config import DEFAULT_SOURCE, DEFAULT_TARGETS
from skillsync.engine.inspector import utc_timestamp
from skillsync.engine.mirror import mirror_into
from skillsync.engine.models import SyncReport, SyncStatus, SyncTargetResult
from skillsync.engine.paths import (
    dedupe_paths,
    is_directory,
    is_ignored,
    resolve_user_path,
)
from skillsync.exceptions import SkillSyncError, SourceInvalidError

logger = logging.getLogger(__name__)

SELF_TARGET_MESSAGE = "Target equals source path and was skipped."


def sync_skills(
    source: str | None = None,
    targets: Iterable[str] | None = None,
    prune: bool = True,
) -> SyncReport:
    """Mirror ``source`` into each of ``targets``.

    Args:
        source: Source directory. ``None`` means ``DEFAULT_SOURCE``.
        targets: Target directories. ``None`` means ``DEFAULT_TARGETS``.
            Resolved and deduplicated in order; a target equal to the
            source is skipped without touching it.
        prune: Remove target entries that are absent from the source.

    Returns:
        A ``SyncReport`` with one result per target, in input order.

    Raises:
        SourceInvalidError: If the source is missing, not a directory, or
            cannot be listed. Raised before any target is touched.
    """
    started = datetime.now(timezone.utc)
    resolved_source = resolve_user_path(DEFAULT_SOURCE if source is None else source)
    resolved_targets = dedupe_paths(DEFAULT_TARGETS if targets is None else targets)
    prune = bool(prune)

    if not resolved_source or not is_directory(resolved_source):
        raise SourceInvalidError(
            f"Source directory is missing or invalid: {resolved_source or source!r}"
        )

    try:
        source_entries = list(Path(resolved_source).iterdir())
    except OSError as exc:
        raise SourceInvalidError(
            f"Source directory is unreadable: {resolved_source}: {exc}"
        ) from exc

    logger.info(
        "Syncing %s into %d target(s) (prune=%s)",
        resolved_source, len(resolved_targets), prune,
    )

    results: list[SyncTargetResult] = []
    success = True
    for target in resolved_targets:
        if target == resolved_source:
            results.append(SyncTargetResult(
                target=target, status=SyncStatus.SKIPPED, error=SELF_TARGET_MESSAGE,
            ))
            continue

        try:
            outcome = mirror_into(resolved_source, target, source_entries, prune)
        except (OSError, SkillSyncError) as exc:
            logger.warning("Sync to %s failed: %s", target, exc)
            success = False
            results.append(SyncTargetResult(
                target=target, status=SyncStatus.ERROR, error=str(exc),
            ))
            continue

        results.append(SyncTargetResult(
            target=target,
            status=SyncStatus.OK,
            copied=outcome.copied,
            removed=outcome.removed,
            skill_count=len(outcome.skill_names),
            skill_names=outcome.skill_names,
        ))

    finished = datetime.now(timezone.utc)
    duration_ms = int((finished - started).total_seconds() * 1000)
    logger.info("Sync finished in %d ms (success=%s)", duration_ms, success)

    return SyncReport(
        success=success,
        source=resolved_source,
        prune=prune,
        started_at=utc_timestamp(started),
        finished_at=utc_timestamp(finished),
        duration_ms=duration_ms,
        source_entry_count=sum(1 for e in source_entries if not is_ignored(e.name)),
        results=results,
    )
