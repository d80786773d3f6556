"""
gridsearch Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from .heuristics import HEURISTICS

# Load .env file if it exists
load_dotenv()


# Ordered like the stdlib logging levels; lower passes more messages through
LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def _optional_int(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Application configuration loaded from environment variables."""

    # Search defaults
    HEURISTIC: str = os.getenv("GRIDSEARCH_HEURISTIC", "manhattan")
    # Unset means unbounded; otherwise the maximum number of node expansions
    MAX_STEPS: int | None = _optional_int(os.getenv("GRIDSEARCH_MAX_STEPS"))
    VERBOSE: bool = os.getenv("GRIDSEARCH_VERBOSE", "").lower() in {"1", "true", "yes"}

    # Logging: minimum level the log_* helpers print (DEBUG, INFO, WARNING, ERROR)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Project Paths. examples/maps only exists in a source checkout; installed
    # wheels need GRIDSEARCH_MAPS_DIR pointing at a map directory.
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = Path(os.getenv("GRIDSEARCH_MAPS_DIR", str(PROJECT_ROOT / "examples" / "maps")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.HEURISTIC not in HEURISTICS:
            raise ValueError(
                f"GRIDSEARCH_HEURISTIC must be one of {sorted(HEURISTICS)}, "
                f"got '{cls.HEURISTIC}'"
            )

        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {list(LOG_LEVELS)}, got '{cls.LOG_LEVEL}'"
            )

        if cls.MAX_STEPS is not None and cls.MAX_STEPS <= 0:
            raise ValueError(
                "GRIDSEARCH_MAX_STEPS must be a positive integer. "
                "Leave it unset for an unbounded search."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "gridsearch Configuration:",
            f"  Heuristic: {cls.HEURISTIC}",
            f"  Max Steps: {cls.MAX_STEPS if cls.MAX_STEPS is not None else 'unbounded'}",
            f"  Verbose: {cls.VERBOSE}",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Maps Dir: {cls.MAPS_DIR}",
        ]
        return "\n".join(lines)
