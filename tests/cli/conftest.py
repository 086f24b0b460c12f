"""Shared fixtures for CLI tests.

Every invocation runs against a config file written under ``tmp_path`` so
the developer's own ``~/.skill-sync/config.yaml`` never leaks in.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path, source_dir: Path, target_dir: Path) -> Path:
    """Config pointing at the shared source and target fixtures."""
    path = tmp_path / "config.yaml"
    path.write_text(
        f"source: {source_dir}\n"
        f"targets:\n"
        f"  - {target_dir}\n"
        f"prune: true\n"
    )
    return path


@pytest.fixture
def cli_env(config_file: Path) -> dict[str, str | None]:
    """Environment for ``runner.invoke``: isolated config, no path overrides."""
    return {
        "SKILL_SYNC_CONFIG": str(config_file),
        "SKILL_SYNC_SOURCE": None,
        "SKILL_SYNC_TARGETS": None,
    }
