"""Interactive prompts for the project setup flow.

The questions are asked by ``PromptSequence``, a linear state machine that
stops as soon as any prompt is cancelled. Prompts go through a ``Prompter``
so tests can script the answers; ``ClickPrompter`` is the terminal version.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol, TypeVar

import click

from create_c_project.core.external_tools import ExternalTool
from create_c_project.core.models import Feature, ProjectConfig, Visibility
from create_c_project.core.validation import validate_project_name
from create_c_project.helpers.settings import Settings

T = TypeVar("T")


class Cancelled:
    """Sentinel type returned by a prompter when the user cancels."""

    _instance: Cancelled | None = None

    def __new__(cls) -> Cancelled:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = Cancelled()

MaybeCancelled = T | Cancelled


@dataclass(frozen=True)
class Option:
    """One choice in a select or multiselect prompt."""

    value: str
    label: str
    hint: str = ""


class Prompter(Protocol):
    """Terminal questions used by the setup flow."""

    def text(
        self,
        message: str,
        placeholder: str = "",
        validate: Callable[[str], str | None] | None = None,
    ) -> MaybeCancelled[str]:
        ...

    def multiselect(self, message: str, options: Sequence[Option]) -> MaybeCancelled[list[str]]:
        ...

    def confirm(self, message: str, default: bool = True) -> MaybeCancelled[bool]:
        ...

    def select(
        self,
        message: str,
        options: Sequence[Option],
        default: str | None = None,
    ) -> MaybeCancelled[str]:
        ...


def parse_multiselect(raw: str, options: Sequence[Option]) -> list[str]:
    """Parse a multiselect answer into option values.

    Accepts option numbers or values separated by spaces or commas, and
    'all'. Blank input selects nothing.

    Raises:
        click.BadParameter: If a token matches no option
    """
    tokens = raw.replace(",", " ").lower().split()
    if not tokens:
        return []
    if tokens == ["all"]:
        return [option.value for option in options]

    selected: list[str] = []
    for token in tokens:
        if token.isdigit() and 1 <= int(token) <= len(options):
            value = options[int(token) - 1].value
        else:
            matches = [option.value for option in options if option.value == token]
            if not matches:
                raise click.BadParameter(f"Unknown choice: {token}")
            value = matches[0]
        if value not in selected:
            selected.append(value)
    # Keep the order the options were offered in
    return [option.value for option in options if option.value in selected]


class ClickPrompter:
    """Prompter built on click.prompt / click.confirm.

    click raises ``click.Abort`` on Ctrl-C or end of input; that is turned
    into the ``CANCELLED`` sentinel.
    """

    def text(
        self,
        message: str,
        placeholder: str = "",
        validate: Callable[[str], str | None] | None = None,
    ) -> MaybeCancelled[str]:
        def _value_proc(value: str) -> str:
            if validate is not None:
                error = validate(value)
                if error:
                    raise click.BadParameter(error)
            return value

        prompt_text = message
        if placeholder:
            prompt_text = f"{message} {click.style(f'({placeholder})', dim=True)}"
        try:
            return click.prompt(
                prompt_text,
                default="",
                show_default=False,
                value_proc=_value_proc,
            )
        except click.Abort:
            return CANCELLED

    def multiselect(self, message: str, options: Sequence[Option]) -> MaybeCancelled[list[str]]:
        click.echo(message)
        for i, option in enumerate(options, 1):
            hint = f" {click.style(f'({option.hint})', dim=True)}" if option.hint else ""
            click.echo(f"  {i}) {option.label}{hint}")
        try:
            return click.prompt(
                "Enter numbers separated by spaces (blank for none)",
                default="",
                show_default=False,
                value_proc=lambda raw: parse_multiselect(raw, options),
            )
        except click.Abort:
            return CANCELLED

    def confirm(self, message: str, default: bool = True) -> MaybeCancelled[bool]:
        try:
            return click.confirm(message, default=default)
        except click.Abort:
            return CANCELLED

    def select(
        self,
        message: str,
        options: Sequence[Option],
        default: str | None = None,
    ) -> MaybeCancelled[str]:
        try:
            return click.prompt(
                message,
                type=click.Choice([option.value for option in options], case_sensitive=False),
                default=default,
            )
        except click.Abort:
            return CANCELLED


FEATURE_OPTIONS = (
    Option(Feature.GITIGNORE.value, "Add .gitignore", hint="Recommended"),
    Option(Feature.README.value, "Add README.md"),
    Option(Feature.TESTS.value, "Add tests directory"),
)

VISIBILITY_OPTIONS = (
    Option(Visibility.PUBLIC.value, "Public"),
    Option(Visibility.PRIVATE.value, "Private"),
)


class PromptStep(Enum):
    """Steps of the prompt sequence, in the order they are asked."""

    NAME = "name"
    FEATURES = "features"
    DESCRIPTION = "description"
    INIT_GIT = "init_git"
    CREATE_REMOTE = "create_remote"
    VISIBILITY = "visibility"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass
class PromptAnswers:
    """Answers gathered so far; frozen into a ProjectConfig when done."""

    name: str = ""
    features: list[Feature] = field(default_factory=list[Feature])
    description: str = ""
    init_git: bool = False
    create_remote: bool = False
    remote_public: bool = False

    def to_config(self) -> ProjectConfig:
        return ProjectConfig(
            name=self.name,
            features=frozenset(self.features),
            description=self.description,
            init_git=self.init_git,
            create_remote=self.create_remote,
            remote_public=self.remote_public,
        )


class PromptSequence:
    """Ask the setup questions one step at a time.

    Each step handler returns the next step; a cancelled prompt moves the
    machine to ``PromptStep.CANCELLED`` and no further questions are asked.
    """

    def __init__(
        self,
        prompter: Prompter,
        tool: ExternalTool,
        base_dir: Path,
        settings: Settings | None = None,
    ) -> None:
        self.prompter = prompter
        self.tool = tool
        self.base_dir = base_dir
        self.settings = settings or Settings()
        self.answers = PromptAnswers()
        self.step = PromptStep.NAME
        self.visited: list[PromptStep] = []

    def run(self) -> ProjectConfig | None:
        """Run every step until done or cancelled.

        Returns:
            The collected ProjectConfig, or None if the user cancelled.
        """
        handlers: dict[PromptStep, Callable[[], PromptStep]] = {
            PromptStep.NAME: self._ask_name,
            PromptStep.FEATURES: self._ask_features,
            PromptStep.DESCRIPTION: self._ask_description,
            PromptStep.INIT_GIT: self._ask_init_git,
            PromptStep.CREATE_REMOTE: self._ask_create_remote,
            PromptStep.VISIBILITY: self._ask_visibility,
        }
        while self.step not in (PromptStep.DONE, PromptStep.CANCELLED):
            self.visited.append(self.step)
            self.step = handlers[self.step]()

        if self.step is PromptStep.CANCELLED:
            return None
        return self.answers.to_config()

    def _ask_name(self) -> PromptStep:
        name = self.prompter.text(
            "What is your project name?",
            placeholder="my-c-project",
            validate=lambda value: validate_project_name(value, self.base_dir),
        )
        if isinstance(name, Cancelled):
            return PromptStep.CANCELLED
        self.answers.name = name
        return PromptStep.FEATURES

    def _ask_features(self) -> PromptStep:
        selected = self.prompter.multiselect("Select project features", FEATURE_OPTIONS)
        if isinstance(selected, Cancelled):
            return PromptStep.CANCELLED
        self.answers.features = [Feature(value) for value in selected]
        if Feature.README in self.answers.features:
            return PromptStep.DESCRIPTION
        return PromptStep.INIT_GIT

    def _ask_description(self) -> PromptStep:
        description = self.prompter.text(
            "Enter a short project description:",
            placeholder="A C project created with create-c-project",
        )
        if isinstance(description, Cancelled):
            return PromptStep.CANCELLED
        self.answers.description = description
        return PromptStep.INIT_GIT

    def _ask_init_git(self) -> PromptStep:
        init_git = self.prompter.confirm("Initialize Git repository?")
        if isinstance(init_git, Cancelled):
            return PromptStep.CANCELLED
        self.answers.init_git = init_git
        if init_git and self.tool.probe_available():
            return PromptStep.CREATE_REMOTE
        return PromptStep.DONE

    def _ask_create_remote(self) -> PromptStep:
        create_remote = self.prompter.confirm("Create GitHub repository? (requires gh CLI)")
        if isinstance(create_remote, Cancelled):
            return PromptStep.CANCELLED
        self.answers.create_remote = create_remote
        return PromptStep.VISIBILITY if create_remote else PromptStep.DONE

    def _ask_visibility(self) -> PromptStep:
        visibility = self.prompter.select(
            "Repository visibility",
            VISIBILITY_OPTIONS,
            default=self.settings.default_visibility,
        )
        if isinstance(visibility, Cancelled):
            return PromptStep.CANCELLED
        self.answers.remote_public = Visibility(visibility.lower()) is Visibility.PUBLIC
        return PromptStep.DONE
