"""Mirror the source's top-level entries into a single target directory.

Every non-ignored source entry is replaced wholesale: whatever sits at the
same name in the target is removed, then the source entry is copied in
with its modification times. No content comparison is done, so an
unchanged skill is rewritten on every sync. With ``prune`` the target
then loses every entry whose name the source does not have.

Errors from listing, copying or removing propagate to the caller.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from skillsync.engine.models import MirrorOutcome
from skillsync.engine.paths import is_ignored, list_skill_names

logger = logging.getLogger(__name__)


def remove_entry(path: str | Path) -> None:
    """Delete a file, symlink or directory tree. A missing path is fine."""
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


def copy_entry(source_path: str | Path, target_path: str | Path) -> None:
    """Replace ``target_path`` with a copy of ``source_path``.

    Directories are copied recursively. Symlinks are recreated as symlinks
    rather than followed. Modification times are preserved via
    ``shutil.copy2``.
    """
    source_path = Path(source_path)
    target_path = Path(target_path)
    remove_entry(target_path)
    if source_path.is_symlink():
        target_path.symlink_to(source_path.readlink())
    elif source_path.is_dir():
        shutil.copytree(source_path, target_path, symlinks=True, copy_function=shutil.copy2)
    else:
        shutil.copy2(source_path, target_path)


def mirror_into(
    source: str | Path,
    target: str | Path,
    source_entries: Sequence[Path],
    prune: bool,
) -> MirrorOutcome:
    """Copy ``source_entries`` from ``source`` into ``target``.

    Args:
        source: Resolved source directory.
        target: Resolved target directory. Created (with parents) if absent.
        source_entries: Snapshot of the source's entries, shared by all
            targets of one sync run.
        prune: Remove target entries that are not in the snapshot.

    Returns:
        A ``MirrorOutcome`` with copy/removal counts and the target's skill
        names after the mirror.

    Raises:
        OSError: On any failure to create, list, copy or remove.
    """
    source_dir = Path(source)
    target_dir = Path(target)
    target_dir.mkdir(parents=True, exist_ok=True)

    usable = [entry for entry in source_entries if not is_ignored(entry.name)]
    source_names = {entry.name for entry in usable}

    copied = 0
    for entry in usable:
        copy_entry(source_dir / entry.name, target_dir / entry.name)
        copied += 1

    removed = 0
    if prune:
        for entry in list(target_dir.iterdir()):
            if entry.name not in source_names:
                logger.debug("Pruning %s", entry)
                remove_entry(entry)
                removed += 1

    skill_names = list_skill_names(target_dir.iterdir())
    return MirrorOutcome(copied=copied, removed=removed, skill_names=skill_names)
