"""Fixed constants and user configuration for skill-sync.

The manifest filename and the ignored artifact name are fixed conventions,
not settings. Default source and target locations live under the user's
home directory and can be overridden per user with a small YAML file:

.. code-block:: yaml

    source: ~/.codex/skills
    targets:
      - ~/.claude/skills
      - ~/agents
    prune: true

The file defaults to ``~/.skill-sync/config.yaml``; the
``SKILL_SYNC_CONFIG`` environment variable points elsewhere.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from skillsync.exceptions import ConfigError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Fixed conventions
# ---------------------------------------------------------------------------

MANIFEST_FILENAME = "SKILL.md"

# macOS Finder metadata. Never counted as a skill and never copied.
IGNORED_NAMES: frozenset[str] = frozenset({".DS_Store"})

# ---------------------------------------------------------------------------
# Default locations
# ---------------------------------------------------------------------------

DEFAULT_SOURCE = str(Path.home() / ".codex" / "skills")
DEFAULT_TARGETS: tuple[str, ...] = (
    str(Path.home() / ".claude" / "skills"),
    str(Path.home() / "agents"),
)

CONFIG_ENV_VAR = "SKILL_SYNC_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".skill-sync" / "config.yaml"


@dataclass(frozen=True)
class SyncConfig:
    """Source, targets and prune policy used when the caller passes none.

    Attributes:
        source: Canonical skills directory (may contain ``~``).
        targets: Mirror destinations, in sync order.
        prune: Whether a sync removes target entries absent from the source.
    """

    source: str = DEFAULT_SOURCE
    targets: tuple[str, ...] = field(default=DEFAULT_TARGETS)
    prune: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "targets": list(self.targets),
            "prune": self.prune,
        }


def config_path() -> Path:
    """Return the configuration file location, honouring ``SKILL_SYNC_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | str | None = None) -> SyncConfig:
    """Load the user configuration, falling back to built-in defaults.

    A missing file is not an error. Keys that are absent keep their
    default value.

    Args:
        path: Explicit file to read. Defaults to ``config_path()``.

    Returns:
        The effective ``SyncConfig``.

    Raises:
        ConfigError: If the file exists but cannot be read, is not valid
            YAML, or has values of the wrong type.
    """
    file_path = Path(path).expanduser() if path is not None else config_path()
    if not file_path.is_file():
        logger.debug("No config file at %s, using defaults", file_path)
        return SyncConfig()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {file_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config file {file_path}: {exc}") from exc

    if data is None:
        return SyncConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")

    return _config_from_dict(data, file_path)


def _config_from_dict(data: dict[str, Any], file_path: Path) -> SyncConfig:
    """Validate raw YAML data and build a ``SyncConfig``."""
    source = data.get("source", DEFAULT_SOURCE)
    if not isinstance(source, str) or not source.strip():
        raise ConfigError(f"'source' in {file_path} must be a non-empty string")

    raw_targets = data.get("targets", list(DEFAULT_TARGETS))
    if isinstance(raw_targets, str):
        raw_targets = [raw_targets]
    if not isinstance(raw_targets, list) or not all(
        isinstance(t, str) for t in raw_targets
    ):
        raise ConfigError(f"'targets' in {file_path} must be a list of strings")
    targets = tuple(t for t in raw_targets if t.strip())
    if not targets:
        targets = DEFAULT_TARGETS

    prune = data.get("prune", True)
    if not isinstance(prune, bool):
        raise ConfigError(f"'prune' in {file_path} must be true or false")

    logger.debug("Loaded config from %s", file_path)
    return SyncConfig(source=source, targets=targets, prune=prune)
