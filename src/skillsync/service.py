"""Orchestration boundary between a user interface and the engine.

``SkillSyncService`` is what a front end (the CLI here, a tray app
elsewhere) talks to. It fills in configured defaults for missing input,
allows only one sync at a time, and refreshes its inspection snapshot
after each sync. The engine underneath stays stateless; all state lives
on the service instance.

Busy policy: a sync requested while another is running is rejected with
``SyncBusyError`` immediately. It is never queued. Retrying after the
running sync has returned is safe.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable

from skillsync.config import SyncConfig, load_config
from skillsync.engine import (
    InspectionResult,
    SkillDetail,
    SyncReport,
    get_skill_details,
    inspect_paths,
    resolve_user_path,
    sync_skills,
)
from skillsync.exceptions import SkillSyncError, SyncBusyError

logger = logging.getLogger(__name__)


class SkillSyncService:
    """Front-end facing wrapper around the stateless engine.

    Usage::

        service = SkillSyncService()
        report = service.sync()
        if not report.success:
            print(report.first_error)
        print(service.last_inspection.targets)
    """

    def __init__(self, config: SyncConfig | None = None) -> None:
        self.config = config if config is not None else load_config()
        self.last_inspection: InspectionResult | None = None
        self.last_report: SyncReport | None = None
        self._sync_lock = threading.Lock()

    @property
    def is_syncing(self) -> bool:
        return self._sync_lock.locked()

    def get_config(self) -> dict[str, Any]:
        """Resolved default source, targets and prune policy."""
        return {
            "source": resolve_user_path(self.config.source),
            "targets": [resolve_user_path(t) for t in self.config.targets],
            "prune": self.config.prune,
        }

    def _normalize_source(self, source: str | None) -> str:
        resolved = resolve_user_path(source) if source else ""
        return resolved or resolve_user_path(self.config.source)

    def _normalize_targets(self, targets: Iterable[Any] | None) -> list[str]:
        """Keep non-blank string targets; fall back to configured targets."""
        cleaned = [
            resolve_user_path(t) for t in (targets or [])
            if isinstance(t, str) and t.strip()
        ]
        if cleaned:
            return cleaned
        return [resolve_user_path(t) for t in self.config.targets]

    def inspect(
        self,
        source: str | None = None,
        targets: Iterable[str] | None = None,
    ) -> InspectionResult:
        """Summarize source and targets and remember the result."""
        result = inspect_paths(
            source=self._normalize_source(source),
            targets=self._normalize_targets(targets),
        )
        self.last_inspection = result
        return result

    def get_skill_details(self, directory_path: str, skill_name: str) -> SkillDetail:
        return get_skill_details(directory_path, skill_name)

    def sync(
        self,
        source: str | None = None,
        targets: Iterable[str] | None = None,
        prune: bool | None = None,
    ) -> SyncReport:
        """Run one sync, then refresh ``last_inspection``.

        Raises:
            SyncBusyError: If another sync on this service is in progress.
            SourceInvalidError: If the source is not an existing directory.
        """
        if not self._sync_lock.acquire(blocking=False):
            raise SyncBusyError("A sync is already running.")
        try:
            resolved_source = self._normalize_source(source)
            resolved_targets = self._normalize_targets(targets)
            report = sync_skills(
                source=resolved_source,
                targets=resolved_targets,
                prune=self.config.prune if prune is None else prune,
            )
            self.last_report = report
            if not report.success:
                logger.warning("Sync completed with errors: %s", report.first_error)

            try:
                self.inspect(source=resolved_source, targets=resolved_targets)
            except SkillSyncError:
                logger.warning("Post-sync inspection failed", exc_info=True)
            return report
        finally:
            self._sync_lock.release()
