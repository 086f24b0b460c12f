"""Tests for configuration loading from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillsync.config import (
    CONFIG_ENV_VAR,
    DEFAULT_SOURCE,
    DEFAULT_TARGETS,
    SyncConfig,
    config_path,
    load_config,
)
from skillsync.exceptions import ConfigError


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.yaml")
        assert config == SyncConfig()
        assert config.source == DEFAULT_SOURCE
        assert config.targets == DEFAULT_TARGETS
        assert config.prune is True

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "source: ~/canon\n"
            "targets:\n"
            "  - ~/one\n"
            "  - /abs/two\n"
            "prune: false\n"
        )
        config = load_config(path)
        assert config.source == "~/canon"
        assert config.targets == ("~/one", "/abs/two")
        assert config.prune is False

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("prune: false\n")
        config = load_config(path)
        assert config.source == DEFAULT_SOURCE
        assert config.targets == DEFAULT_TARGETS
        assert config.prune is False

    def test_single_string_target(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("targets: ~/only\n")
        assert load_config(path).targets == ("~/only",)

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == SyncConfig()

    def test_blank_targets_fall_back(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("targets:\n  - ''\n")
        assert load_config(path).targets == DEFAULT_TARGETS

    @pytest.mark.parametrize(
        "content",
        [
            "source: [a, b\n",
            "- just\n- a list\n",
            "source: 12\n",
            "targets: {a: 1}\n",
            "targets: [1, 2]\n",
            "prune: sometimes\n",
        ],
    )
    def test_malformed_file_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError):
            load_config(path)

    def test_env_var_selects_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("source: /from/env\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert config_path() == path
        assert load_config().source == "/from/env"

    def test_to_dict(self) -> None:
        data = SyncConfig(source="/s", targets=("/t",), prune=False).to_dict()
        assert data == {"source": "/s", "targets": ["/t"], "prune": False}
