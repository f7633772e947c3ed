"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, fixtures to register that command, obtain a CliRunner, and run
tests within an isolated filesystem, plus label documents for `inspect`.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from shelfwise.entrypoints.cli.main import shelfwise

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'shelfwise.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("shelfwise.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `shelfwise` for the duration of a test."""
    shelfwise.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(shelfwise, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects (log files, label files) to the test."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def label_doc():
    """A complete label analysis document for a year-long domestic product."""
    return {
        "productName": "Rice Crackers",
        "isDomestic": True,
        "dates": {
            "totalShelfLifeDays": 365,
            "expiryDate": "2025-06-01",
            "manufactureDate": None,
        },
        "manufacturer": {
            "name": "Crunch Co.",
            "phone": "04-222-3333",
            "address": "5 Mill Lane",
        },
        "allergens": [
            {"category": "Soybeans and their products", "found": True},
        ],
        "hasPorkOrBeef": False,
    }


@pytest.fixture
def write_label(fs):
    """Write a label document to a JSON file in the isolated filesystem."""

    def _write(doc, name: str = "label.json") -> str:
        Path(name).write_text(json.dumps(doc), encoding="utf-8")
        return name

    return _write
