"""Rule-file fixtures for tests under `tests/integration/`."""

from collections.abc import Callable
from pathlib import Path

import pytest

# pylint: disable=redefined-outer-name

VALID_RULES = """\
version = "2026-draft"

[[domestic]]
min_days = 30
dc_window = 20
store_window = 10
dc_display = "20 days"
store_display = "10 days"
label = "T >= 30 days"

[[domestic]]
min_days = 0
max_days = 30
dc_window = 2
store_window = 1.5
dc_display = "D+2 days"
store_display = "D+1.5 days"
label = "T < 30 days"
mode = "relative"

[[imported]]
min_days = 0
dc_window = 15
store_window = 5
dc_display = "15 days"
store_display = "5 days"
label = "any import"
"""


@pytest.fixture
def write_rules(tmp_path) -> Callable[..., Path]:
    """Factory writing TOML text to a rule file under tmp_path."""

    def _write(text: str = VALID_RULES, name: str = "rules.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_rules() -> str:
    """TOML text of a small, valid rule book."""
    return VALID_RULES
