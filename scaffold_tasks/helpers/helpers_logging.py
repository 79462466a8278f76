"""Simple logging helpers for scaffold CLI output."""

import os
import sys


def _color_enabled() -> bool:
    return not os.environ.get("NO_COLOR")


class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    ORANGE = '\033[38;5;209m'
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def colorize(msg: str, *codes: str) -> str:
    """Wrap msg in the given ANSI codes unless NO_COLOR is set."""
    if not codes or not _color_enabled():
        return msg
    return f"{''.join(codes)}{msg}{Colors.RESET}"


def print_info(msg: str) -> None:
    """Print an info message."""
    print(colorize(msg, Colors.CYAN))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(colorize(f"✓ {msg}", Colors.GREEN))


def print_skip(msg: str) -> None:
    """Print a skipped-item message."""
    print(colorize(f"⊘ {msg}", Colors.DIM))


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(colorize(f"❌ {msg}", Colors.RED), file=sys.stderr)
