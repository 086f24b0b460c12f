"""Tests for ``skill-sync sync`` and ``skill-sync inspect``.

Verifies:
    - JSON output matches the engine's report and inspection records.
    - Exit code 1 when a target fails, 2 when the source is invalid.
    - --no-prune keeps target extras.
    - Environment variables supply source and targets.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from click.testing import CliRunner

from skillsync.cli.main import cli


class TestSyncCommand:

    def test_sync_json_with_configured_defaults(
        self, runner: CliRunner, cli_env: dict, target_dir: Path, list_dirs,
    ) -> None:
        result = runner.invoke(cli, ["sync", "--format", "json"], env=cli_env)
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["prune"] is True
        assert data["results"][0]["copied"] == 2
        assert data["results"][0]["removed"] == 1
        assert list_dirs(target_dir) == ["alpha", "beta"]

    def test_no_prune_keeps_extras(
        self, runner: CliRunner, cli_env: dict, target_dir: Path, list_dirs,
    ) -> None:
        result = runner.invoke(cli, ["sync", "--no-prune", "--format", "json"], env=cli_env)
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["results"][0]["removed"] == 0
        assert list_dirs(target_dir) == ["alpha", "beta", "legacy"]

    def test_explicit_source_and_targets(
        self, runner: CliRunner, cli_env: dict, source_dir: Path, tmp_path: Path,
    ) -> None:
        t1 = tmp_path / "t1"
        t2 = tmp_path / "t2"
        result = runner.invoke(
            cli,
            ["sync", "-s", str(source_dir), "-t", str(t1), "-t", str(t2), "--format", "json"],
            env=cli_env,
        )
        assert result.exit_code == 0, result.output
        targets = [r["target"] for r in json.loads(result.output)["results"]]
        assert targets == [str(t1), str(t2)]

    def test_targets_from_environment(
        self, runner: CliRunner, cli_env: dict, tmp_path: Path,
    ) -> None:
        t1 = tmp_path / "env1"
        t2 = tmp_path / "env2"
        env = dict(cli_env, SKILL_SYNC_TARGETS=os.pathsep.join([str(t1), str(t2)]))
        result = runner.invoke(cli, ["sync", "--format", "json"], env=env)
        assert result.exit_code == 0, result.output
        assert t1.is_dir() and t2.is_dir()

    def test_failed_target_exit_code_1(
        self, runner: CliRunner, cli_env: dict, tmp_path: Path,
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        good = tmp_path / "good"
        result = runner.invoke(
            cli,
            ["sync", "-t", str(blocker / "t"), "-t", str(good), "--format", "json"],
            env=cli_env,
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["success"] is False
        assert [r["status"] for r in data["results"]] == ["error", "ok"]

    def test_invalid_source_exit_code_2(
        self, runner: CliRunner, cli_env: dict, tmp_path: Path,
    ) -> None:
        result = runner.invoke(
            cli, ["sync", "-s", str(tmp_path / "missing"), "--format", "json"], env=cli_env,
        )
        assert result.exit_code == 2
        assert "Source directory is missing" in json.loads(result.output)["error"]

    def test_text_output(self, runner: CliRunner, cli_env: dict) -> None:
        result = runner.invoke(cli, ["sync"], env=cli_env)
        assert result.exit_code == 0, result.output
        assert "Sync Results" in result.output


class TestInspectCommand:

    def test_inspect_json(
        self, runner: CliRunner, cli_env: dict, source_dir: Path, target_dir: Path,
    ) -> None:
        result = runner.invoke(cli, ["inspect", "--format", "json"], env=cli_env)
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["source"]["path"] == str(source_dir)
        assert data["source"]["skill_names"] == ["alpha", "beta"]
        assert data["targets"][0]["path"] == str(target_dir)
        assert data["targets"][0]["skill_names"] == ["legacy"]

    def test_inspect_missing_target_is_not_an_error(
        self, runner: CliRunner, cli_env: dict, tmp_path: Path,
    ) -> None:
        missing = tmp_path / "nowhere"
        result = runner.invoke(
            cli, ["inspect", "-t", str(missing), "--format", "json"], env=cli_env,
        )
        assert result.exit_code == 0
        target = json.loads(result.output)["targets"][0]
        assert target["exists"] is False
        assert target["skill_count"] == 0

    def test_inspect_text(self, runner: CliRunner, cli_env: dict) -> None:
        result = runner.invoke(cli, ["inspect"], env=cli_env)
        assert result.exit_code == 0, result.output
        assert "Skill Directories" in result.output
