"""Wrappers around the git and GitHub CLI tools.

Every call returns a ``ToolResult`` instead of raising, so callers can
report partial success. Commands are passed as argument lists and never
through a shell.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from create_c_project.core.models import ToolResult, Visibility
from create_c_project.helpers.helpers_logging import print_error
from create_c_project.helpers.settings import Settings


class ExternalTool(Protocol):
    """Operations the setup flow needs from git and gh."""

    def probe_available(self) -> bool:
        """Return True if the GitHub CLI can be run."""
        ...

    def init_repo(self, path: Path) -> ToolResult:
        """Initialize a git repository in path."""
        ...

    def stage_and_commit(self, path: Path) -> ToolResult:
        """Stage all files in path and create the initial commit."""
        ...

    def create_remote(self, path: Path, name: str, visibility: Visibility) -> ToolResult:
        """Create a GitHub repository for path and push to it."""
        ...


def run_command(command: list[str], cwd: Path | None = None) -> ToolResult:
    """Run a command, capturing output.

    Returns:
        ToolResult with ok=False when the binary is missing or exits non-zero.
    """
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        return ToolResult(
            ok=False,
            command=command,
            message=f"Command not found: {command[0]}",
        )
    except OSError as exc:
        return ToolResult(ok=False, command=command, message=str(exc))

    if result.returncode != 0:
        output = (result.stderr or result.stdout or "").strip()
        return ToolResult(
            ok=False,
            command=command,
            message=output or f"exit status {result.returncode}",
        )
    return ToolResult(ok=True, command=command)


class GitHubCliTool:
    """ExternalTool backed by the ``git`` and ``gh`` binaries."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def probe_available(self) -> bool:
        return run_command([self.settings.gh_command, "--version"]).ok

    def init_repo(self, path: Path) -> ToolResult:
        return run_command([self.settings.git_command, "init"], cwd=path)

    def stage_and_commit(self, path: Path) -> ToolResult:
        git = self.settings.git_command
        staged = run_command([git, "add", "."], cwd=path)
        if not staged.ok:
            return staged
        return run_command(
            [git, "commit", "-m", self.settings.commit_message],
            cwd=path,
        )

    def create_remote(self, path: Path, name: str, visibility: Visibility) -> ToolResult:
        return run_command(
            [
                self.settings.gh_command,
                "repo",
                "create",
                name,
                f"--{visibility.value}",
                "--source=.",
                f"--remote={self.settings.remote_name}",
                "--push",
            ],
            cwd=path,
        )


def init_git_and_commit(tool: ExternalTool, project_path: Path) -> bool:
    """Run git init, add and commit; stop at the first failure.

    Returns:
        True if the repository was initialized and committed.
    """
    result = tool.init_repo(project_path)
    if result.ok:
        result = tool.stage_and_commit(project_path)
    if not result.ok:
        print_error(f"Error initializing git: {result.message}")
        return False
    return True


def create_github_repo(
    tool: ExternalTool,
    project_path: Path,
    project_name: str,
    visibility: Visibility,
) -> bool:
    """Create the GitHub repository and push the initial commit.

    Returns:
        True if gh reported success.
    """
    result = tool.create_remote(project_path, project_name, visibility)
    if not result.ok:
        print_error(f"Error creating GitHub repository: {result.message}")
        return False
    return True
