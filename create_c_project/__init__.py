"""
create-c-project

An interactive scaffolder for minimal C projects with optional
git and GitHub setup.
"""

__version__ = "0.1.0"
