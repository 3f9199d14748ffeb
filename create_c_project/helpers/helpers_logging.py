"""Simple logging helpers for create-c-project CLI."""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    OKCYAN = '\033[96m'
    CYAN = '\033[96m'  # Alias for OKCYAN
    OKGREEN = '\033[92m'
    GREEN = '\033[92m'  # Alias for OKGREEN
    WARNING = '\033[93m'
    YELLOW = '\033[93m'  # Alias for WARNING
    FAIL = '\033[91m'
    RED = '\033[91m'  # Alias for FAIL
    ENDC = '\033[0m'
    RESET = '\033[0m'  # Alias for ENDC
    BOLD = '\033[1m'
    INVERSE = '\033[7m'
    DIM = '\033[2m'


def _paint(text: str, *codes: str) -> str:
    """Wrap text in color codes unless NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return text
    return f"{''.join(codes)}{text}{Colors.ENDC}"


def highlight(text: str) -> str:
    """Return text colored green, used for project names in messages."""
    return _paint(text, Colors.GREEN)


def print_banner(msg: str) -> None:
    """Print an inverted banner, used for the intro line."""
    print(_paint(f" {msg} ", Colors.INVERSE))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(msg, Colors.OKCYAN))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(f"✓ {msg}", Colors.OKGREEN))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(f"⚠️  {msg}", Colors.YELLOW))


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(_paint(f"❌ {msg}", Colors.RED), file=sys.stderr)
