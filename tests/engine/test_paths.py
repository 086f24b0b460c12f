"""Tests for path resolution and the error-swallowing filesystem probes."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from skillsync.engine.paths import (
    dedupe_paths,
    is_directory,
    list_skill_names,
    path_exists,
    read_entries_safe,
    resolve_user_path,
)


class TestResolveUserPath:
    """resolve_user_path never touches the filesystem and never raises."""

    @pytest.mark.parametrize("value", ["", "   ", None, 42, ["~"]])
    def test_empty_or_non_string_yields_empty(self, value: object) -> None:
        assert resolve_user_path(value) == ""

    def test_tilde_alone_is_home(self) -> None:
        assert resolve_user_path("~") == str(Path.home())

    def test_tilde_slash_joins_home(self) -> None:
        assert resolve_user_path("~/agents/skills") == os.path.join(
            str(Path.home()), "agents", "skills"
        )

    def test_input_is_trimmed(self) -> None:
        assert resolve_user_path("  ~  ") == str(Path.home())

    def test_relative_path_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_user_path("skills") == str(tmp_path / "skills")

    def test_absolute_path_normalized(self) -> None:
        assert resolve_user_path("/a/b/../c/") == os.path.abspath("/a/c")

    def test_tilde_user_form_is_not_expanded(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only ``~`` and ``~/`` are special; ``~name`` is a relative path."""
        monkeypatch.chdir(tmp_path)
        assert resolve_user_path("~other") == str(tmp_path / "~other")

    def test_nonexistent_path_still_resolves(self) -> None:
        assert resolve_user_path("/no/such/place") == "/no/such/place"


class TestDedupePaths:

    def test_first_occurrence_wins(self, tmp_path: Path) -> None:
        a = str(tmp_path / "a")
        b = str(tmp_path / "b")
        assert dedupe_paths([a, b, a + "/", b]) == [a, b]

    def test_blank_entries_dropped(self, tmp_path: Path) -> None:
        a = str(tmp_path / "a")
        assert dedupe_paths(["", a, "  "]) == [a]


class TestProbes:
    """Probes map filesystem errors to negative answers."""

    def test_path_exists(self, tmp_path: Path) -> None:
        assert path_exists(tmp_path) is True
        assert path_exists(tmp_path / "missing") is False

    def test_is_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        assert is_directory(tmp_path) is True
        assert is_directory(file_path) is False
        assert is_directory(tmp_path / "missing") is False

    def test_stat_errors_count_as_absence(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def denied(self: Path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "is_dir", denied)
        monkeypatch.setattr(Path, "stat", denied)
        assert is_directory(tmp_path) is False
        assert path_exists(tmp_path) is False

    def test_read_entries_returns_paths(self, tmp_path: Path) -> None:
        (tmp_path / "one").mkdir()
        assert read_entries_safe(tmp_path) == [tmp_path / "one"]

    def test_read_entries_missing_dir(self, tmp_path: Path) -> None:
        assert read_entries_safe(tmp_path / "missing") == []

    def test_read_entries_on_file(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        assert read_entries_safe(file_path) == []

    def test_list_skill_names_filters_and_sorts(self, tmp_path: Path) -> None:
        (tmp_path / "zeta").mkdir()
        (tmp_path / "Alpha").mkdir()
        (tmp_path / "beta").mkdir()
        (tmp_path / ".DS_Store").write_text("")
        (tmp_path / "notes.txt").write_text("")
        names = list_skill_names(read_entries_safe(tmp_path))
        assert names == ["Alpha", "beta", "zeta"]

    def test_list_skill_names_skips_symlinked_dirs(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        (tmp_path / "link").symlink_to(real, target_is_directory=True)
        assert list_skill_names(read_entries_safe(tmp_path)) == ["real"]
