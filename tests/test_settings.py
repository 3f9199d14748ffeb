"""Tests for loading user settings from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_c_project.helpers.settings import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    ConfigError,
    Settings,
    get_config_path,
    load_settings,
)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "nope.yaml") == Settings()


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("")

    assert load_settings(config) == Settings()


def test_values_are_loaded(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "gh_command: /usr/local/bin/gh\n"
        "commit_message: 'chore: initial commit'\n"
        "remote_name: upstream\n"
        "default_visibility: private\n"
    )

    settings = load_settings(config)

    assert settings.gh_command == "/usr/local/bin/gh"
    assert settings.git_command == "git"
    assert settings.commit_message == "chore: initial commit"
    assert settings.remote_name == "upstream"
    assert settings.default_visibility == "private"
    assert settings.templates_dir is None


def test_templates_dir_is_a_path(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(f"templates_dir: {tmp_path / 'tpl'}\n")

    assert load_settings(config).templates_dir == tmp_path / "tpl"


def test_env_var_selects_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("git_command: /opt/git\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config))

    assert get_config_path() == config
    assert load_settings().git_command == "/opt/git"


def test_default_config_path_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert get_config_path() == DEFAULT_CONFIG_FILE


def test_unknown_keys_warn(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("colour: blue\ngit_command: git\n")

    settings = load_settings(config)

    assert settings == Settings()
    assert "Ignoring unknown setting 'colour'" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("git_command: [a, b\n", "Cannot read settings file"),
        ("- just\n- a list\n", "must contain a mapping"),
        ("gh_command: 3\n", "'gh_command' must be a non-empty string"),
        ("commit_message: ''\n", "'commit_message' must be a non-empty string"),
        ("default_visibility: internal\n", "default_visibility"),
    ],
)
def test_invalid_settings_raise(tmp_path: Path, content: str, match: str) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(content)

    with pytest.raises(ConfigError, match=match):
        load_settings(config)
