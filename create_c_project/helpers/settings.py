"""User settings for create-c-project.

Settings are read from an optional YAML file. The location is taken from
``$CREATE_C_PROJECT_CONFIG`` when set, otherwise
``~/.config/create-c-project/config.yaml``. A missing file yields defaults.

Example config.yaml::

    gh_command: gh
    commit_message: "chore: initial commit"
    default_visibility: private
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import cast

import yaml

from create_c_project.helpers.helpers_logging import print_warning

CONFIG_ENV_VAR = "CREATE_C_PROJECT_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "create-c-project" / "config.yaml"

_VISIBILITIES = ("public", "private")
_STRING_KEYS = (
    "git_command",
    "gh_command",
    "commit_message",
    "remote_name",
    "default_visibility",
    "templates_dir",
)


class ConfigError(ValueError):
    """Raised when the settings file cannot be read or has invalid values."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one run.

    Attributes:
        git_command: git binary name or path.
        gh_command: GitHub CLI binary name or path.
        commit_message: Message used for the initial commit.
        remote_name: Remote wired up by ``gh repo create``.
        default_visibility: Preselected answer for the visibility prompt.
        templates_dir: Override for the template directory, or None for
            the templates bundled with the package.
    """

    git_command: str = "git"
    gh_command: str = "gh"
    commit_message: str = "Initial commit"
    remote_name: str = "origin"
    default_visibility: str = "public"
    templates_dir: Path | None = None


def get_config_path() -> Path:
    """Return the settings file location, honouring the env override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_FILE


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from YAML, falling back to defaults.

    Args:
        path: Explicit settings file. Defaults to ``get_config_path()``.

    Returns:
        Frozen Settings instance.

    Raises:
        ConfigError: If the file is not valid YAML or has bad values.
    """
    config_path = path or get_config_path()
    if not config_path.is_file():
        return Settings()

    try:
        raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read settings file {config_path}: {exc}") from exc

    if raw_data is None:
        return Settings()
    if not isinstance(raw_data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    data = cast(dict[str, object], raw_data)
    values: dict[str, str] = {}
    for key, value in data.items():
        if key not in _STRING_KEYS:
            print_warning(f"Ignoring unknown setting '{key}' in {config_path}")
            continue
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Setting '{key}' must be a non-empty string")
        values[key] = value

    visibility = values.get("default_visibility", "public")
    if visibility not in _VISIBILITIES:
        raise ConfigError(
            f"Setting 'default_visibility' must be one of {', '.join(_VISIBILITIES)}"
        )

    templates_dir = values.pop("templates_dir", None)
    return Settings(
        **values,
        templates_dir=Path(templates_dir).expanduser() if templates_dir else None,
    )
