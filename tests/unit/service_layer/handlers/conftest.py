"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING, Any

import pytest

from shelfwise.adapters.clocks import FixedClock
from shelfwise.bootstrap.bootstrap import build_message_bus
from shelfwise.domain.compliance import LabelAnalysis
from shelfwise.domain.standard_rules import STANDARD_RULEBOOK
from shelfwise.service_layer.handlers import COMMAND_HANDLERS

if TYPE_CHECKING:
    from shelfwise.domain.rule_table import RuleBook
    from shelfwise.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name

FAKE_TODAY = date(2024, 7, 1)


@pytest.fixture
def make_test_bus() -> Callable[..., MessageBus]:
    """Factory to create a message bus with a frozen clock for testing."""

    def _make(
        today: date = FAKE_TODAY, rulebook: RuleBook = STANDARD_RULEBOOK
    ) -> MessageBus:
        return build_message_bus(
            {"rulebook": rulebook, "clock": FixedClock(today)}, COMMAND_HANDLERS
        )

    return _make


@pytest.fixture
def label_doc() -> dict[str, Any]:
    """An upstream label analysis document with nothing missing."""
    return {
        "productName": "Green Tea",
        "isDomestic": True,
        "dates": {"totalShelfLifeDays": 365, "expiryDate": "2025-06-01"},
        "manufacturer": {
            "name": "Leaf Co.",
            "phone": "03-555-0100",
            "address": "8 Harbor St.",
        },
        "allergens": [],
        "hasPorkOrBeef": False,
    }


@pytest.fixture
def make_label(label_doc) -> Callable[..., LabelAnalysis]:
    """Factory building a LabelAnalysis from the default document plus overrides."""

    def _make(**overrides: Any) -> LabelAnalysis:
        return LabelAnalysis.from_dict({**label_doc, **overrides})

    return _make
