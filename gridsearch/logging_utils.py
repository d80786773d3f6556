"""Logging utilities for gridsearch.

Provides color-coded output to distinguish search outcomes in console runs.
"""

import os
from enum import Enum

from .config import LOG_LEVELS, Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for outcome types
    BLUE = "\033[94m"      # Deterministic search steps
    RED = "\033[91m"       # Failures (no path, exhausted budget)
    GREEN = "\033[92m"     # Path found
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GRIDSEARCH_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GRIDSEARCH_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def enabled(level: str) -> bool:
    """Whether messages at ``level`` pass the configured LOG_LEVEL.

    An unrecognized LOG_LEVEL behaves like INFO; ``Config.validate()`` reports it.
    """
    threshold = LOG_LEVELS.get(Config.LOG_LEVEL, LOG_LEVELS["INFO"])
    return LOG_LEVELS[level] >= threshold


def log_deterministic(message: str) -> None:
    """Log a deterministic search step (blue)."""
    if not enabled("INFO"):
        return
    print(colored(f"{EMOJI_DETERMINISTIC} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log a failed search (red)."""
    if not enabled("WARNING"):
        return
    print(colored(f"{EMOJI_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    if not enabled("INFO"):
        return
    print(colored(f"{EMOJI_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if not enabled("INFO"):
        return
    print(colored(f"{EMOJI_INFO} {message}", Color.CYAN))


# Markers for outcome types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"  # Deterministic operation
EMOJI_ERROR = "[!]"          # Error/no path
EMOJI_SUCCESS = "[✓]"        # Success
EMOJI_INFO = "[i]"           # Information
