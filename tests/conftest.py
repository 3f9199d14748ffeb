"""Shared fixtures for the create-c-project test suite.

Provides a scripted ``Prompter`` that replays canned answers and a fake
``ExternalTool`` that records calls instead of running git or gh.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from create_c_project.core.models import ToolResult, Visibility
from create_c_project.core.prompts import CANCELLED, Cancelled, Option

# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable colors and point the settings file at a missing path."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CREATE_C_PROJECT_CONFIG", str(config_dir / "config.yaml"))


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an empty working directory and cd into it."""
    base_dir = tmp_path / "workspace"
    base_dir.mkdir()
    with pytest.MonkeyPatch.context() as mp:
        mp.chdir(base_dir)
        yield base_dir


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter that answers from a fixed list, in order.

    ``CANCELLED`` in the list cancels that prompt. Text answers rejected by
    the prompt's validator are recorded in ``errors`` and the next answer
    is used, the way the terminal prompter re-asks.
    """

    def __init__(self, answers: Sequence[object]) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []
        self.errors: list[str] = []

    def _next(self, kind: str, message: str) -> object:
        self.asked.append((kind, message))
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {kind}: {message!r}")
        return self.answers.pop(0)

    def text(
        self,
        message: str,
        placeholder: str = "",
        validate: Callable[[str], str | None] | None = None,
    ) -> str | Cancelled:
        while True:
            answer = self._next("text", message)
            if answer is CANCELLED:
                return CANCELLED
            assert isinstance(answer, str)
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.errors.append(error)

    def multiselect(self, message: str, options: Sequence[Option]) -> list[str] | Cancelled:
        answer = self._next("multiselect", message)
        if answer is CANCELLED:
            return CANCELLED
        assert isinstance(answer, list)
        return list(answer)

    def confirm(self, message: str, default: bool = True) -> bool | Cancelled:
        answer = self._next("confirm", message)
        if answer is CANCELLED:
            return CANCELLED
        return bool(answer)

    def select(
        self,
        message: str,
        options: Sequence[Option],
        default: str | None = None,
    ) -> str | Cancelled:
        answer = self._next("select", message)
        if answer is CANCELLED:
            return CANCELLED
        assert isinstance(answer, str)
        return answer


# ---------------------------------------------------------------------------
# Fake external tool
# ---------------------------------------------------------------------------


class FakeTool:
    """ExternalTool double that records calls.

    Args:
        available: Result of the gh probe.
        fail: Operation names that should fail
            ('init', 'commit', 'remote').
    """

    def __init__(self, available: bool = True, fail: Sequence[str] = ()) -> None:
        self.available = available
        self.fail = set(fail)
        self.calls: list[str] = []
        self.remote_args: tuple[Path, str, Visibility] | None = None

    def _result(self, operation: str, command: list[str]) -> ToolResult:
        self.calls.append(operation)
        if operation in self.fail:
            return ToolResult(ok=False, command=command, message=f"{operation} failed")
        return ToolResult(ok=True, command=command)

    def probe_available(self) -> bool:
        self.calls.append("probe")
        return self.available

    def init_repo(self, path: Path) -> ToolResult:
        return self._result("init", ["git", "init"])

    def stage_and_commit(self, path: Path) -> ToolResult:
        return self._result("commit", ["git", "commit", "-m", "Initial commit"])

    def create_remote(self, path: Path, name: str, visibility: Visibility) -> ToolResult:
        self.remote_args = (path, name, visibility)
        return self._result("remote", ["gh", "repo", "create", name])


@pytest.fixture()
def fake_tool() -> FakeTool:
    """FakeTool with gh available and every operation succeeding."""
    return FakeTool()


@pytest.fixture()
def make_tool() -> Callable[..., FakeTool]:
    """Return the FakeTool factory for tests that need custom behaviour."""
    return FakeTool


@pytest.fixture()
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Return a factory building a ScriptedPrompter from positional answers.

    Usage::

        prompter = make_prompter("demo", [], False)
    """

    def _make(*answers: object) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return _make
