"""
CLI module for create-c-project.

This module provides the command-line entry point that is installed as the
``create-c-project`` console script.
"""

from .commands import main

__all__ = ["main"]
