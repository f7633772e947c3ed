"""Global pytest fixtures and hooks for SHELFWISE."""

from __future__ import annotations

from pathlib import Path

import pytest

from shelfwise.config import LOG_PATH_ENV, RULES_PATH_ENV

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> mark applied to everything collected under it.
TIER_MARKS = {"unit": "unit", "integration": "integration", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:  # pylint: disable=unused-argument
    """Mark each item with the tier of the folder it lives in."""
    for item in items:
        try:
            tier = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        mark = TIER_MARKS.get(tier)
        if mark and item.get_closest_marker(mark) is None:
            item.add_marker(getattr(pytest.mark, mark))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SHELFWISE_* settings out of the suite."""
    for name in (RULES_PATH_ENV, LOG_PATH_ENV):
        monkeypatch.delenv(name, raising=False)
