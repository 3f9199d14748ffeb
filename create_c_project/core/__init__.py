"""Core stages of the project setup: prompts, validation, files, tools.

Public API:
    run_setup: Run the full interactive setup and return an Outcome
    validate_project_name: Check a candidate project name
    create_project_structure: Write the project skeleton to disk
    GitHubCliTool: git / gh backed ExternalTool
"""

from .external_tools import ExternalTool, GitHubCliTool
from .materialize import TemplateNotFoundError, create_project_structure, load_template
from .models import (
    Feature,
    Outcome,
    OutcomeReason,
    OutcomeStatus,
    ProjectConfig,
    ToolResult,
    Visibility,
)
from .setup_flow import run_setup
from .validation import validate_project_name

__all__ = [
    # Main public API
    "run_setup",
    "validate_project_name",
    "create_project_structure",
    "load_template",
    "TemplateNotFoundError",
    # External tools
    "ExternalTool",
    "GitHubCliTool",
    # Data types
    "Feature",
    "Visibility",
    "ProjectConfig",
    "ToolResult",
    "Outcome",
    "OutcomeStatus",
    "OutcomeReason",
]
