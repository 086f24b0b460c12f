"""Path resolution and best-effort filesystem probes.

``resolve_user_path`` turns whatever the user typed into an absolute path
without touching the filesystem. The probe helpers answer "is it there?"
questions for the read-only inspection paths: every ``OSError`` is mapped
to a negative answer, so inspection never fails because a directory is
missing or unreadable.

Write paths (mirror, source listing for a sync) do not use these probes;
they call ``Path.iterdir`` directly so failures propagate.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable

from skillsync.config import IGNORED_NAMES

logger = logging.getLogger(__name__)


def resolve_user_path(value: Any) -> str:
    """Normalize a user-supplied path string.

    - Non-string, empty or blank input yields ``""``.
    - ``~`` is the home directory; ``~/rest`` is ``home/rest``.
    - Anything else is made absolute against the working directory.

    Symlinks are not resolved and existence is not checked.
    """
    if not isinstance(value, str):
        return ""

    trimmed = value.strip()
    if not trimmed:
        return ""

    if trimmed == "~":
        return str(Path.home())

    # Lexical normalization only. Path.resolve() would follow symlinks.
    if trimmed.startswith("~/"):
        return os.path.normpath(Path.home() / trimmed[2:])

    return os.path.abspath(trimmed)


def dedupe_paths(paths: Iterable[Any]) -> list[str]:
    """Resolve paths, drop empty results, keep the first occurrence of each."""
    resolved = (resolve_user_path(p) for p in paths)
    return list(dict.fromkeys(p for p in resolved if p))


def is_ignored(name: str) -> bool:
    return name in IGNORED_NAMES


def path_exists(path: str | Path) -> bool:
    """Return True if ``path`` exists. Access failures count as absence."""
    try:
        Path(path).stat()
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return False
    return True


def is_directory(path: str | Path) -> bool:
    """Return True if ``path`` is an existing directory (symlinks followed)."""
    try:
        return Path(path).is_dir()
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return False


def read_entries_safe(path: str | Path) -> list[Path]:
    """List the immediate entries of a directory, or ``[]`` if that fails."""
    try:
        return list(Path(path).iterdir())
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.warning("Cannot list %s: %s", path, exc)
        return []


def entry_is_dir(entry: Path) -> bool:
    """True for real subdirectories. Symlinks to directories do not count."""
    try:
        return not entry.is_symlink() and entry.is_dir()
    except OSError:
        return False


def list_skill_names(entries: Iterable[Path]) -> list[str]:
    """Names of the non-ignored subdirectories among ``entries``, sorted."""
    return sorted(
        entry.name
        for entry in entries
        if entry_is_dir(entry) and not is_ignored(entry.name)
    )
