"""Project name validation."""

import re
from pathlib import Path

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-_]+$")

NAME_REQUIRED = "Project name is required!"
NAME_EXISTS = "Directory already exists!"
NAME_INVALID = "Invalid project name!"


def validate_project_name(name: str, base_dir: Path) -> str | None:
    """Check a candidate project name.

    Rules are checked in order and only the first failure is reported:
    empty, already exists under ``base_dir``, regex mismatch.

    Args:
        name: Candidate name as typed by the user.
        base_dir: Directory the project would be created in.

    Returns:
        None if the name is valid, otherwise the rejection message.
    """
    if not name:
        return NAME_REQUIRED
    if _path_exists(base_dir / name):
        return NAME_EXISTS
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return NAME_INVALID
    return None


def _path_exists(path: Path) -> bool:
    # Names the OS cannot stat (e.g. longer than NAME_MAX) cannot collide
    try:
        return path.exists()
    except OSError:
        return False
