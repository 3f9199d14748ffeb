"""Top-level setup flow: prompt, create files, then run git and gh.

``run_setup`` never exits the process. It returns an ``Outcome`` that the
CLI turns into an exit code.
"""

from __future__ import annotations

from pathlib import Path

from create_c_project.core.external_tools import (
    ExternalTool,
    create_github_repo,
    init_git_and_commit,
)
from create_c_project.core.materialize import create_project_structure
from create_c_project.core.models import Outcome, OutcomeReason, OutcomeStatus
from create_c_project.core.prompts import Prompter, PromptSequence
from create_c_project.helpers.helpers_logging import (
    highlight,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from create_c_project.helpers.settings import Settings


def run_setup(
    prompter: Prompter,
    tool: ExternalTool,
    base_dir: Path,
    settings: Settings | None = None,
) -> Outcome:
    """Run one interactive project setup.

    Args:
        prompter: Source of answers (terminal or scripted)
        tool: git / gh wrapper
        base_dir: Directory the project is created in
        settings: Loaded user settings

    Returns:
        Outcome describing how far the setup got.
    """
    settings = settings or Settings()
    config = PromptSequence(prompter, tool, base_dir, settings).run()
    if config is None:
        print_warning("Operation cancelled")
        return Outcome(OutcomeStatus.CANCELLED)

    try:
        print_info("Creating project...")
        project_path = create_project_structure(config, base_dir, settings.templates_dir)
        print_success("Project created")
    except (OSError, UnicodeError) as exc:
        print_error("Failed to create project")
        print_error(f"Error: {exc}")
        print_info("Setup failed")
        return Outcome(
            OutcomeStatus.FAILED,
            reason=OutcomeReason.MATERIALIZE_FAILED,
            project=config,
            detail=str(exc),
        )

    if config.init_git:
        print_info("Initializing git repository...")
        if not init_git_and_commit(tool, project_path):
            print_warning("Project created (git initialization failed)")
            return Outcome(
                OutcomeStatus.PARTIAL,
                reason=OutcomeReason.GIT_INIT_FAILED,
                project=config,
            )
        print_success("Repository initialized.")

    if config.create_remote:
        print_info("Creating GitHub repository...")
        if not create_github_repo(tool, project_path, config.name, config.visibility):
            print_warning("Project created (GitHub repository creation failed)")
            return Outcome(
                OutcomeStatus.PARTIAL,
                reason=OutcomeReason.REMOTE_CREATE_FAILED,
                project=config,
            )

    print_success(f"Project {highlight(config.name)} created successfully")
    print_info("Setup completed successfully")
    return Outcome(OutcomeStatus.SUCCESS, project=config)
