"""Data structures shared by the prompt, materialize and tool stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Feature(Enum):
    """Optional artifacts a project can be created with."""

    GITIGNORE = "gitignore"
    README = "readme"
    TESTS = "tests"


class Visibility(Enum):
    """Visibility of the hosted GitHub repository."""

    PUBLIC = "public"
    PRIVATE = "private"


class OutcomeStatus(Enum):
    """Overall result of one run."""

    SUCCESS = "success"
    CANCELLED = "cancelled"
    PARTIAL = "partial"
    FAILED = "failed"


class OutcomeReason(Enum):
    """Why a run ended partial or failed."""

    MATERIALIZE_FAILED = "materialize_failed"
    GIT_INIT_FAILED = "git_init_failed"
    REMOTE_CREATE_FAILED = "remote_create_failed"


@dataclass(frozen=True)
class ProjectConfig:
    """Answers collected from the prompt sequence.

    Attributes:
        name: Validated project (and directory) name.
        features: Selected optional features.
        description: README description, empty when no README.
        init_git: Whether to initialize a local git repository.
        create_remote: Whether to create a GitHub repository.
        remote_public: True for a public repository, False for private.
    """

    name: str
    features: frozenset[Feature] = frozenset()
    description: str = ""
    init_git: bool = False
    create_remote: bool = False
    remote_public: bool = False

    def has(self, feature: Feature) -> bool:
        """Return True if the feature was selected."""
        return feature in self.features

    @property
    def visibility(self) -> Visibility:
        return Visibility.PUBLIC if self.remote_public else Visibility.PRIVATE


@dataclass
class ToolResult:
    """Result of one external tool call.

    Attributes:
        ok: True if every command exited with status 0.
        command: The last command attempted.
        message: Error output when not ok, empty otherwise.
    """

    ok: bool
    command: list[str] = field(default_factory=list[str])
    message: str = ""


@dataclass
class Outcome:
    """Structured result of ``run_setup``; the CLI maps it to an exit code."""

    status: OutcomeStatus
    reason: OutcomeReason | None = None
    project: ProjectConfig | None = None
    detail: str = ""

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 for success/cancelled, 1 otherwise."""
        if self.status in (OutcomeStatus.SUCCESS, OutcomeStatus.CANCELLED):
            return 0
        return 1
