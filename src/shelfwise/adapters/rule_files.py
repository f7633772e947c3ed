"""Load alternate rule books from TOML files.

A rule file looks like::

    version = "2026-draft"

    [[domestic]]
    min_days = 1080
    dc_window = 750
    store_window = 540
    dc_display = "25 months"
    store_display = "18 months"
    label = "T ≥ 36 months"

    [[domestic]]
    min_days = 0
    max_days = 1080
    ...
    mode = "relative"        # optional, defaults to "absolute"

    [[imported]]
    ...

Both tables go through the same validation as the standard tables, so a file
with a gap, an overlap or no catch-all tier is rejected when it is loaded.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from shelfwise.domain.errors import RuleTableError
from shelfwise.domain.rule_table import RuleBook, ShelfLifeRule
from shelfwise.domain.value_objects import RuleMode

logger = logging.getLogger(__name__)

REQUIRED_STR_KEYS = ("dc_display", "store_display", "label")
REQUIRED_NUM_KEYS = ("dc_window", "store_window")


class RuleFileError(Exception):
    """Raised when a rule file cannot be read or describes an invalid rule book."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid rule file {path}: {reason}")
        self.path = path
        self.reason = reason


def load_rulebook(path: Path) -> RuleBook:
    """Read and validate a rule book from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        The validated rule book.

    Raises:
        RuleFileError: If the file is unreadable, is not valid TOML, has
            malformed tiers, or describes tables that do not partition the
            shelf-life days.
    """
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except OSError as e:
        raise RuleFileError(path, f"cannot be read ({e.strerror})") from e
    except tomllib.TOMLDecodeError as e:
        raise RuleFileError(path, f"not valid TOML ({e})") from e

    version = document.get("version")
    if not isinstance(version, str) or not version.strip():
        raise RuleFileError(path, "'version' must be a non-empty string")

    domestic = _parse_rules(path, document, "domestic")
    imported = _parse_rules(path, document, "imported")

    try:
        book = RuleBook.build(domestic, imported, version)
    except RuleTableError as e:
        raise RuleFileError(path, str(e)) from e

    logger.info("Loaded rule book %s from %s", version, path)
    return book


def _parse_rules(
    path: Path, document: Mapping[str, Any], key: str
) -> list[ShelfLifeRule]:
    rows = document.get(key)
    if not isinstance(rows, list) or not rows:
        raise RuleFileError(path, f"'{key}' must be a non-empty array of tables")
    return [_parse_rule(path, f"{key}[{i}]", row) for i, row in enumerate(rows)]


def _parse_rule(path: Path, where: str, row: Any) -> ShelfLifeRule:
    if not isinstance(row, dict):
        raise RuleFileError(path, f"{where} must be a table")

    min_days = row.get("min_days")
    if not _is_int(min_days):
        raise RuleFileError(path, f"{where}.min_days must be an integer")
    max_days = row.get("max_days")
    if max_days is not None and not _is_int(max_days):
        raise RuleFileError(path, f"{where}.max_days must be an integer")

    for name in REQUIRED_NUM_KEYS:
        value = row.get(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RuleFileError(path, f"{where}.{name} must be a number")
    for name in REQUIRED_STR_KEYS:
        if not isinstance(row.get(name), str):
            raise RuleFileError(path, f"{where}.{name} must be a string")

    try:
        mode = RuleMode(row.get("mode", RuleMode.ABSOLUTE.value))
    except ValueError as e:
        raise RuleFileError(
            path, f"{where}.mode must be 'absolute' or 'relative'"
        ) from e

    return ShelfLifeRule(
        min_days=min_days,
        max_days=max_days,
        dc_window=row["dc_window"],
        store_window=row["store_window"],
        dc_display=row["dc_display"],
        store_display=row["store_display"],
        label=row["label"],
        mode=mode,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
