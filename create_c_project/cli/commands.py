#!/usr/bin/env python3
"""create-c-project CLI - Main Entry Point.

Usage:
    create-c-project

Asks a few questions and creates a C project skeleton in the current
directory, optionally with a git repository and a GitHub remote.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from create_c_project import __version__
from create_c_project.core.external_tools import GitHubCliTool
from create_c_project.core.prompts import ClickPrompter
from create_c_project.core.setup_flow import run_setup
from create_c_project.helpers.helpers_logging import print_banner, print_error, print_warning
from create_c_project.helpers.settings import ConfigError, load_settings

PROG_NAME = "create-c-project"


@click.command(
    name=PROG_NAME,
    help="Interactively scaffold a minimal C project.",
)
@click.version_option(__version__, prog_name=PROG_NAME)
def _click_cli() -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print_error(str(exc))
        return 1

    print_banner(PROG_NAME)
    outcome = run_setup(
        ClickPrompter(),
        GitHubCliTool(settings),
        Path.cwd(),
        settings,
    )
    return outcome.exit_code


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.Abort:
        print_warning("Operation cancelled")
        return 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
