"""Shared fixtures for skill-sync tests.

Every test works on throwaway directories under ``tmp_path``: a source
skills directory, a target directory, and helpers to populate them with
skill bundles.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def write_text(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def dir_names(path: Path) -> list[str]:
    """Sorted names of the subdirectories of ``path``."""
    return sorted(p.name for p in path.iterdir() if p.is_dir())


@pytest.fixture
def write_file():
    """The ``write_text`` helper, for tests that build their own trees."""
    return write_text


@pytest.fixture
def list_dirs():
    """The ``dir_names`` helper."""
    return dir_names


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Source directory holding two skills, ``alpha`` and ``beta``."""
    source = tmp_path / "source"
    write_text(
        source / "alpha" / "SKILL.md",
        "---\n"
        "name: Alpha Skill\n"
        "description: First test skill\n"
        "---\n"
        "# Alpha\n\n"
        "Alpha does the first thing.\n",
    )
    write_text(source / "alpha" / "scripts" / "run.sh", "echo alpha\n")
    write_text(source / "beta" / "SKILL.md", "beta\n")
    return source


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Target directory with one stale skill that the source does not have."""
    target = tmp_path / "target"
    write_text(target / "legacy" / "OLD.md", "old\n")
    return target


@pytest.fixture
def skill_manifest() -> str:
    """A manifest exercising every recognized header field."""
    return (
        "---\n"
        "name: Foo\n"
        'description: "Bar baz"\n'
        "metadata:\n"
        "  short-description: 'Quick'\n"
        "---\n"
        "First real line.\n"
    )
