"""Configuration utilities for SHELFWISE.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

RULES_PATH_ENV = "SHELFWISE_RULES_PATH"  # pragma: no mutate
LOG_PATH_ENV = "SHELFWISE_LOG_PATH"  # pragma: no mutate


class RulesPathNotFoundError(Exception):
    """Raised when SHELFWISE_RULES_PATH points at a file that does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{RULES_PATH_ENV} points to a missing file: {path}")
        self.path = path


def get_rules_path() -> Path | None:
    """Get the path of an alternate rule book from the environment.

    Returns:
        The value of `SHELFWISE_RULES_PATH` as a Path, or None when unset or
        empty (the standard rule book applies).

    Raises:
        RulesPathNotFoundError: If `SHELFWISE_RULES_PATH` is set but the file
            does not exist.
    """
    if not (raw := os.environ.get(RULES_PATH_ENV)):
        return None
    path = Path(raw).expanduser()
    if not path.is_file():
        raise RulesPathNotFoundError(path)
    return path
